"""
Command line entry point.

Usage::

    scriptree [-c CONFIG] [-p NAMES] [-r MODULE] [-s] [-l LEVEL] [script] [args ...]

Running without a script prints the available scripts.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from scriptree.core.config import ScriptsConfig
from scriptree.execution import get_scripts_and_args, run_package_scripts
from scriptree.help import render_help
from scriptree.loading import load_config, preload_module

log = logging.getLogger("scriptree")

DEFAULT_CONFIG_FILES = ("package-scripts.py", "package-scripts.yml")
LOG_LEVELS = ("debug", "info", "warning", "error", "disable")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scriptree",
        description="Run scripts defined in a package-scripts configuration.",
    )
    parser.add_argument("-c", "--config", help="Config file to use (defaults to package-scripts.py, then package-scripts.yml)")
    parser.add_argument("-p", "--parallel", metavar="NAMES", help="Comma-separated scripts to run in parallel")
    parser.add_argument(
        "-r",
        "--require",
        action="append",
        default=[],
        metavar="MODULE",
        help="Module to preload before running scripts (repeatable)",
    )
    parser.add_argument("-s", "--silent", action="store_true", help="Do not log anything")
    parser.add_argument("-l", "--log-level", choices=LOG_LEVELS, help="Log level to use")
    parser.add_argument("script", nargs="?", help="Script to run; comma-separate several to run them together")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed through to the script")
    return parser


def find_config(config_path: str | None) -> ScriptsConfig | None:
    """Load the given config file, or the first default config file present."""
    if config_path:
        return load_config(config_path, log)

    for candidate in DEFAULT_CONFIG_FILES:
        if (Path.cwd() / candidate).is_file():
            return load_config(candidate, log)

    log.error("Unable to find a config file (tried %s)", ", ".join(DEFAULT_CONFIG_FILES))
    return None


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    namespace = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    for module in namespace.require:
        preload_module(module, log)

    config = find_config(namespace.config)
    if config is None:
        return 1

    request = get_scripts_and_args(
        scripts=[namespace.script] if namespace.script else [],
        parallel=namespace.parallel,
        raw_args=[namespace.script, *namespace.args] if namespace.script else [],
    )
    if not request.script_names:
        print(render_help(config))
        return 0

    overrides = {}
    if namespace.silent:
        overrides["silent"] = True
    if namespace.log_level:
        overrides["log_level"] = namespace.log_level
    if overrides:
        config = config.model_copy(update={"options": config.options.model_copy(update=overrides)})

    result = run_package_scripts(config, request, logger=log)
    if result.error is not None:
        print(result.error.message, file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
