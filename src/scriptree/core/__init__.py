"""
Core scriptree components.

This package provides the script tree model, name normalization and the
top-level configuration model.
"""

from scriptree.core.config import ScriptsConfig, ScriptsOptions
from scriptree.core.naming import find_child_key, get_child, normalize_name
from scriptree.core.tree_node import (
    Group,
    Leaf,
    ScriptNode,
    ScriptTree,
    TreeNode,
    command_of,
    description_of,
    is_hidden,
    parse_script_tree,
)
from scriptree.core.types import Command, EnvConfig, EnvMap, RawConfig

__all__ = [
    "Command",
    "EnvConfig",
    "EnvMap",
    "RawConfig",
    "TreeNode",
    "Leaf",
    "Group",
    "ScriptNode",
    "ScriptTree",
    "ScriptsConfig",
    "ScriptsOptions",
    "command_of",
    "description_of",
    "is_hidden",
    "parse_script_tree",
    "normalize_name",
    "find_child_key",
    "get_child",
]
