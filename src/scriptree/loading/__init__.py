"""
scriptree configuration loading.

This package provides the pluggable file loaders and module preloading.
"""

from scriptree.loading.loaders import (
    ConfigLoader,
    PythonModuleLoader,
    YamlLoader,
    get_loader,
    load_config,
    preload_module,
)

__all__ = [
    "ConfigLoader",
    "PythonModuleLoader",
    "YamlLoader",
    "get_loader",
    "load_config",
    "preload_module",
]
