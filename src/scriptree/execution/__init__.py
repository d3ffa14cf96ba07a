"""
scriptree execution components.

This package turns a request into running child processes: it splits the
command line, composes per-script environments, starts the processes and
aggregates their exit codes.
"""

from scriptree.execution.args import ExecutionRequest, get_scripts_and_args, split_names
from scriptree.execution.env import build_process_env, compose_script_env
from scriptree.execution.orchestrator import (
    compose_command,
    get_log_level,
    run_package_script,
    run_package_scripts,
)
from scriptree.execution.results import RunResult, ScriptFailure
from scriptree.execution.task_group import JoinPolicy, ProcessGroup

__all__ = [
    "ExecutionRequest",
    "get_scripts_and_args",
    "split_names",
    "compose_script_env",
    "build_process_env",
    "compose_command",
    "get_log_level",
    "run_package_script",
    "run_package_scripts",
    "RunResult",
    "ScriptFailure",
    "JoinPolicy",
    "ProcessGroup",
]
