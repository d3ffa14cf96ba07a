"""
Dotted script path resolution.

A path such as ``build.x.y`` is resolved by descending into the script tree
one segment per dot. The final node must yield a command string, either
directly, through a leaf's ``script`` or through a group's ``default``.
"""

from scriptree.core.naming import get_child
from scriptree.core.tree_node import Group, ScriptTree, command_of
from scriptree.core.types import Command
from scriptree.exceptions import MissingScriptError


def resolve_script(tree: ScriptTree, path: str) -> Command:
    """
    Resolve a dotted script path to the command it runs.

    Segments are matched with camel/kebab case equivalence. The
    ``hidden_from_help`` flag is not consulted.

    Params:
        tree: Parsed script tree
        path: Dotted script path (e.g., "lint.sub.thing")

    Returns:
        The command string

    Raises:
        MissingScriptError: If a segment is missing, an intermediate node
            cannot hold children, or the final node has no command
    """
    segments = path.split(".")
    cursor = tree

    for index, segment in enumerate(segments):
        node = get_child(cursor, segment) if segment else None
        if node is None:
            raise MissingScriptError(path, segment)

        if index == len(segments) - 1:
            command = command_of(node)
            if command is None:
                raise MissingScriptError(path, segment)
            return command

        if not isinstance(node, Group):
            raise MissingScriptError(path, segment)
        cursor = node.children

    # Unreachable: str.split always yields at least one segment
    raise MissingScriptError(path)


def get_script_to_run(tree: ScriptTree, path: str) -> Command | None:
    """Resolve ``path`` like `resolve_script`, returning None when it is missing."""
    try:
        return resolve_script(tree, path)
    except MissingScriptError:
        return None
