"""
Top-level scripts configuration model.

A configuration is the ``scripts`` tree plus an optional ``options`` block.
Option names accept both their snake_case field names and the camelCase
spelling used in configuration files.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scriptree.core.tree_node import ScriptTree, parse_script_tree
from scriptree.core.types import EnvConfig
from scriptree.exceptions import ConfigValidationError

# Accepted values of the logLevel option, "disable" turning logging off
LOG_LEVELS = ("debug", "info", "warning", "warn", "error", "critical", "disable")


class ScriptsOptions(BaseModel):
    """Options controlling how scripts are run."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    env_config: EnvConfig = Field(default_factory=dict, alias="envConfig")
    silent: bool = False
    log_level: str | None = Field(default=None, alias="logLevel")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}', expected one of: {', '.join(LOG_LEVELS)}")
        return level


class ScriptsConfig(BaseModel):
    """A loaded scripts configuration."""

    scripts: ScriptTree = Field(default_factory=dict)
    options: ScriptsOptions = Field(default_factory=ScriptsOptions)

    @field_validator("scripts", mode="before")
    @classmethod
    def _parse_scripts(cls, value: Any) -> ScriptTree:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigValidationError("scripts", "scripts must be a mapping")
        return parse_script_tree(value)

    @field_validator("options", mode="before")
    @classmethod
    def _default_options(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ScriptsConfig":
        """
        Build a configuration from a raw ``{scripts, options}`` mapping.

        Raises:
            ConfigValidationError: If the tree or options are malformed
        """
        try:
            return cls.model_validate(
                {"scripts": raw.get("scripts"), "options": raw.get("options")}
            )
        except ValidationError as error:
            raise ConfigValidationError("options", str(error)) from error
