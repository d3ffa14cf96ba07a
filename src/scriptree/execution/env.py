"""
Environment composition for spawned scripts.
"""

import os
from collections.abc import Mapping

from scriptree.core.types import EnvMap

DEFAULT_ENV_KEY = "default"


def compose_script_env(
    env_config: Mapping[str, Mapping[str, str]] | None, script_name: str
) -> EnvMap:
    """
    Compose the environment overrides for one script.

    The ``default`` entry applies to every script; the entry named after the
    script is laid over it.

    Params:
        env_config: Script name (or "default") to variable overrides
        script_name: Name of the script being run, as requested

    Returns:
        New mapping of variable name to value
    """
    env_config = env_config or {}
    env = dict(env_config.get(DEFAULT_ENV_KEY) or {})
    env.update(env_config.get(script_name) or {})
    return env


def build_process_env(overrides: Mapping[str, str], base: Mapping[str, str] | None = None) -> EnvMap:
    """Overlay ``overrides`` onto ``base`` (the current process environment by default)."""
    env = dict(os.environ if base is None else base)
    env.update(overrides)
    return env
