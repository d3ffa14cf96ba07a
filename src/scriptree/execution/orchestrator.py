"""
Running resolved scripts as child processes.

Each requested script is resolved against the configured tree, composed
into a shell command with the passthrough arguments and started with the
parent's standard streams and an environment overlaid with its overrides.
All scripts of a request run concurrently; their outcomes are aggregated by
a `ProcessGroup`.
"""

import logging
import subprocess

from scriptree.core.config import ScriptsConfig, ScriptsOptions
from scriptree.core.tree_node import ScriptTree
from scriptree.core.types import EnvConfig
from scriptree.exceptions import MissingScriptError
from scriptree.execution.args import ExecutionRequest
from scriptree.execution.env import build_process_env, compose_script_env
from scriptree.execution.results import SPAWN_FAILURE, RunResult, ScriptFailure
from scriptree.execution.task_group import JoinPolicy, ProcessGroup
from scriptree.resolution import resolve_script

log = logging.getLogger(__name__)

# Level above CRITICAL, so nothing gets through
DISABLED = logging.CRITICAL + 1


def get_log_level(options: ScriptsOptions) -> int | None:
    """
    Map run options to a logging level.

    Returns:
        The configured level, a level that disables output when ``silent``
        is set, or None to keep the logger's own level
    """
    if options.log_level:
        if options.log_level == "disable":
            return DISABLED
        return logging.getLevelName(options.log_level.upper())
    if options.silent:
        return DISABLED
    return None


def get_run_logger(options: ScriptsOptions, logger: logging.Logger | None = None) -> logging.Logger:
    """Get the logger to report runs on, honouring ``log_level`` and ``silent``."""
    logger = logger or log
    level = get_log_level(options)
    if level is None:
        return logger
    run_logger = logger.getChild("run")
    run_logger.setLevel(level)
    return run_logger


def compose_command(script: str, args: str = "") -> str:
    return f"{script} {args}".strip()


def run_package_script(
    scripts: ScriptTree,
    script_name: str,
    args: str = "",
    env_config: EnvConfig | None = None,
    logger: logging.Logger | None = None,
) -> subprocess.Popen | ScriptFailure:
    """
    Resolve and start a single script.

    Params:
        scripts: Parsed script tree
        script_name: Dotted script path as requested
        args: Passthrough arguments appended to the command
        env_config: Environment overrides per script name
        logger: Logger for the "executing" line

    Returns:
        The started process, or a `ScriptFailure` if the script could not be
        resolved or started
    """
    logger = logger or log
    try:
        script = resolve_script(scripts, script_name)
    except MissingScriptError as error:
        return ScriptFailure(message=str(error), ref=error.ref)

    command = compose_command(script, args)
    env = build_process_env(compose_script_env(env_config, script_name))
    logger.info("executing: %s", command)
    try:
        return subprocess.Popen(command, shell=True, env=env)
    except OSError as error:
        logger.error("Unable to start \"%s\": %s", command, error)
        return ScriptFailure(message=f'Unable to start "{command}": {error}', ref=SPAWN_FAILURE)


def run_package_scripts(
    config: ScriptsConfig,
    request: ExecutionRequest,
    *,
    policy: JoinPolicy = JoinPolicy.FAIL_FAST,
    logger: logging.Logger | None = None,
) -> RunResult:
    """
    Run every script of a request concurrently and aggregate the outcome.

    All scripts are started before any is waited on. With the default
    ``FAIL_FAST`` policy a script that cannot be resolved makes the result an
    error straight away; processes already started for other scripts are
    left running and are not waited on.

    Params:
        config: Loaded scripts configuration
        request: Script names and passthrough arguments
        policy: How start-up failures affect waiting for the others
        logger: Logger to report on (defaults to this module's logger)

    Returns:
        `RunResult` holding the first non-zero exit code (0 if none), or
        the first start-up failure
    """
    logger = get_run_logger(config.options, logger)
    group = ProcessGroup(policy)

    for script_name in request.script_names:
        outcome = run_package_script(
            config.scripts,
            script_name,
            request.passthrough_args,
            config.options.env_config,
            logger,
        )
        if isinstance(outcome, ScriptFailure):
            group.add_failure(outcome)
        else:
            group.add_process(outcome)

    return group.join()
