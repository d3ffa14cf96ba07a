"""
Rendering the available scripts as a tree.

Each visible script is shown on one line as ``name - description - command``,
where the description and command are left out when a node has none.
Children are drawn beneath their group with box-drawing branches and are
named by their full dotted path::

    Available scripts (camel or kebab case accepted)
    ├─ lint - echo "lint"
    │  └─ lint.sub - echo "lint sub"
    └─ test - echo "test"
"""

from collections.abc import Mapping
from typing import Any

from scriptree.core.config import ScriptsConfig
from scriptree.core.tree_node import (
    Group,
    ScriptNode,
    ScriptTree,
    command_of,
    description_of,
    is_hidden,
    parse_script_tree,
)

HEADER = "Available scripts (camel or kebab case accepted)"
NO_SCRIPTS = "There are no scripts available"

BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
SPACE = "   "
SEPARATOR = " - "


def render_help(config: ScriptsConfig | Mapping[str, Any]) -> str:
    """
    Render the scripts of a configuration as an indented tree.

    Hidden entries are left out together with their children.

    Params:
        config: A `ScriptsConfig`, or a script tree (parsed or raw)

    Returns:
        Newline-delimited help text, or the no-scripts message when there is
        nothing to show
    """
    tree = config.scripts if isinstance(config, ScriptsConfig) else parse_script_tree(config)
    lines = _render_tree(tree, prefix="", parent_path="")
    if not lines:
        return NO_SCRIPTS
    return "\n".join([HEADER, *lines])


def format_entry(name: str, node: ScriptNode) -> str:
    parts = [name]
    description = description_of(node)
    if description:
        parts.append(description)
    command = command_of(node)
    if command:
        parts.append(command)
    return SEPARATOR.join(parts)


def _render_tree(tree: ScriptTree, prefix: str, parent_path: str) -> list[str]:
    entries = [(key, node) for key, node in tree.items() if not is_hidden(node)]
    lines = []

    for index, (key, node) in enumerate(entries):
        is_last = index == len(entries) - 1
        name = f"{parent_path}.{key}" if parent_path else key
        lines.append(prefix + (LAST_BRANCH if is_last else BRANCH) + format_entry(name, node))
        if isinstance(node, Group):
            child_prefix = prefix + (SPACE if is_last else PIPE)
            lines.extend(_render_tree(node.children, child_prefix, name))

    return lines
