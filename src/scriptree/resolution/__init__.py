"""
scriptree resolution components.

This package maps dotted script paths onto commands in a parsed script tree.
"""

from scriptree.resolution.resolver import get_script_to_run, resolve_script

__all__ = [
    "resolve_script",
    "get_script_to_run",
]
