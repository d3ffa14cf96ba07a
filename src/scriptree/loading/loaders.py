"""
Loading scripts configurations from files.

Two loaders are provided: `PythonModuleLoader` executes a Python file and
reads its module-level ``scripts`` and ``options`` (or a single ``config``
mapping), and `YamlLoader` reads a YAML document. A file that does not exist
is logged and yields None so callers can decide whether to continue; a file
that exists but does not parse raises `ConfigLoadError`.
"""

import importlib
import importlib.util
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from typing import Any

import yaml

from scriptree.core.config import ScriptsConfig
from scriptree.exceptions import ConfigLoadError

log = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


class ConfigLoader(ABC):
    """
    Base class for configuration file loaders.

    Subclasses implement `read`, returning the raw ``{scripts, options}``
    mapping and raising `ConfigLoadError` on parse errors.
    """

    label: str = ""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or log

    def load(self, path: str | Path) -> ScriptsConfig | None:
        """
        Load a configuration file relative to the current working directory.

        Params:
            path: Path to the configuration file

        Returns:
            The loaded configuration, or None if the file does not exist

        Raises:
            ConfigLoadError: If the file exists but cannot be parsed
            ConfigValidationError: If the parsed configuration is malformed
        """
        resolved = Path.cwd() / path
        if not resolved.is_file():
            self.logger.error('Unable to find %s config at "%s"', self.label, path)
            return None

        raw = self.read(resolved)
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ConfigLoadError(str(path), "config must be a mapping")
        return ScriptsConfig.from_raw(raw)

    @abstractmethod
    def read(self, path: Path) -> Any:
        """Read the raw configuration from an existing file."""


class PythonModuleLoader(ConfigLoader):
    """Loads a configuration from a Python file."""

    label = "Python"

    def read(self, path: Path) -> Mapping[str, Any]:
        module = _exec_module_file(path)
        if hasattr(module, "config"):
            return module.config
        if not hasattr(module, "scripts"):
            raise ConfigLoadError(str(path), "module defines neither 'config' nor 'scripts'")
        return {"scripts": module.scripts, "options": getattr(module, "options", None)}


class YamlLoader(ConfigLoader):
    """Loads a configuration from a YAML file."""

    label = "YML"

    def read(self, path: Path) -> Any:
        with path.open(encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as error:
                raise ConfigLoadError(str(path), str(error)) from error


def get_loader(path: str | Path, logger: logging.Logger | None = None) -> ConfigLoader:
    """Pick a loader for ``path`` by its suffix."""
    if Path(path).suffix.lower() in YAML_SUFFIXES:
        return YamlLoader(logger)
    return PythonModuleLoader(logger)


def load_config(path: str | Path, logger: logging.Logger | None = None) -> ScriptsConfig | None:
    """Load the configuration at ``path`` with the loader matching its suffix."""
    return get_loader(path, logger).load(path)


def preload_module(name: str, logger: logging.Logger | None = None) -> ModuleType | None:
    """
    Import a module for its side effects before scripts are run.

    Params:
        name: Dotted module name, or a path to a Python file (relative paths
            are taken from the current working directory)
        logger: Logger for the failure warning

    Returns:
        The loaded module, or None if it could not be loaded
    """
    logger = logger or log
    try:
        if _is_path(name):
            resolved = Path.cwd() / name
            if not resolved.is_file():
                raise FileNotFoundError(f"No such file: {resolved}")
            return _exec_module_file(resolved)
        return importlib.import_module(name)
    except Exception as error:
        logger.warning('Unable to preload "%s": %s', name, error)
        return None


def _is_path(name: str) -> bool:
    return name.startswith((".", "/")) or name.endswith(".py") or "\\" in name


def _exec_module_file(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem.replace("-", "_"), path)
    if spec is None or spec.loader is None:
        raise ConfigLoadError(str(path), "not a loadable Python file")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except SyntaxError as error:
        raise ConfigLoadError(str(path), str(error)) from error
    return module
