"""
scriptree - Run named scripts from a nested configuration tree

scriptree resolves dotted script names (camel or kebab case) out of a
scripts configuration, runs them as concurrent child processes and reports
a single exit status.
"""

from importlib.metadata import version

from scriptree.core import Group, Leaf, ScriptsConfig, ScriptsOptions, parse_script_tree
from scriptree.execution import (
    ExecutionRequest,
    JoinPolicy,
    RunResult,
    ScriptFailure,
    compose_script_env,
    get_scripts_and_args,
    run_package_scripts,
)
from scriptree.help import render_help
from scriptree.loading import load_config, preload_module
from scriptree.resolution import get_script_to_run, resolve_script

__version__ = version("scriptree")

__all__ = [
    "__version__",
    "Leaf",
    "Group",
    "ScriptsConfig",
    "ScriptsOptions",
    "parse_script_tree",
    "resolve_script",
    "get_script_to_run",
    "ExecutionRequest",
    "get_scripts_and_args",
    "compose_script_env",
    "JoinPolicy",
    "RunResult",
    "ScriptFailure",
    "run_package_scripts",
    "render_help",
    "load_config",
    "preload_module",
]
