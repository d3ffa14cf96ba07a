"""
scriptree exception classes.

This package provides all exception types used throughout scriptree for
consistent error handling and reporting.
"""

from scriptree.exceptions.core import (
    ConfigLoadError,
    ConfigValidationError,
    MissingScriptError,
    ScripTreeError,
)

__all__ = [
    "ScripTreeError",
    "MissingScriptError",
    "ConfigValidationError",
    "ConfigLoadError",
]
