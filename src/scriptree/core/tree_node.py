"""
Script tree node model.

A scripts configuration is a nested mapping whose values come in three
shapes: a literal command string, a leaf object carrying a ``script``, or a
group object holding an optional ``default`` plus named children. The raw
mapping is converted once by `parse_script_tree` into `Leaf` and `Group`
instances so that resolution and rendering never have to sniff shapes.
"""

import logging
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from scriptree.core.naming import normalize_name
from scriptree.core.types import Command
from scriptree.exceptions import ConfigValidationError

log = logging.getLogger(__name__)

# Keys that describe a node itself rather than naming a child script
RESERVED_KEYS = frozenset({"default", "script", "description", "hiddenFromHelp"})


class TreeNode(BaseModel):
    """
    Base class for parsed script tree nodes.

    Nodes are immutable once parsed. ``hidden_from_help`` only affects help
    rendering; hidden scripts remain runnable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hidden_from_help: bool = Field(default=False, alias="hiddenFromHelp")


class Leaf(TreeNode):
    """A single runnable script with an optional description."""

    script: StrictStr
    description: StrictStr | None = None


class Group(TreeNode):
    """A named collection of scripts, optionally runnable through ``default``."""

    default: StrictStr | Leaf | None = None
    children: dict[str, "ScriptNode"] = Field(default_factory=dict)


ScriptNode = Union[Command, Leaf, Group]
ScriptTree = dict[str, ScriptNode]

Group.model_rebuild()


def command_of(node: ScriptNode | None) -> Command | None:
    """
    Get the command a node runs when it is addressed directly.

    Params:
        node: Parsed tree node

    Returns:
        The command string, or None for a group without a default
    """
    if isinstance(node, str):
        return node
    if isinstance(node, Leaf):
        return node.script
    if isinstance(node, Group):
        return command_of(node.default)
    return None


def description_of(node: ScriptNode | None) -> str | None:
    """Get a node's description, looking through a group's default leaf."""
    if isinstance(node, Leaf):
        return node.description
    if isinstance(node, Group) and isinstance(node.default, Leaf):
        return node.default.description
    return None


def is_hidden(node: ScriptNode) -> bool:
    return isinstance(node, TreeNode) and node.hidden_from_help


def parse_script_tree(
    raw: Mapping[str, Any],
    logger: logging.Logger | None = None,
    _prefix: str = "",
) -> ScriptTree:
    """
    Convert a raw scripts mapping into a tree of parsed nodes.

    Entries whose value is neither a string nor a mapping (numbers, lists,
    null) are dropped. Already parsed nodes are passed through, so parsing a
    parsed tree returns an equal tree.

    Params:
        raw: Mapping of script name to raw value
        logger: Logger for skipped entries (defaults to this module's logger)

    Returns:
        Ordered mapping of script name to `ScriptNode`

    Raises:
        ConfigValidationError: If a key is not a string, two sibling keys
            normalize to the same name, or a node has an invalid shape
    """
    logger = logger or log
    tree: ScriptTree = {}
    seen: dict[str, str] = {}

    for key, value in raw.items():
        path = f"{_prefix}.{key}" if _prefix else str(key)
        if not isinstance(key, str):
            raise ConfigValidationError(path, "script names must be strings")

        node = _parse_node(value, path, logger)
        if node is None:
            logger.debug("Skipping script entry '%s': unsupported value %r", path, value)
            continue

        canonical = normalize_name(key)
        if canonical in seen:
            raise ConfigValidationError(
                path, f"name collides with '{seen[canonical]}' (both normalize to '{canonical}')"
            )
        seen[canonical] = key
        tree[key] = node

    return tree


def _parse_node(value: Any, path: str, logger: logging.Logger) -> ScriptNode | None:
    if isinstance(value, (str, TreeNode)):
        return value
    if not isinstance(value, Mapping):
        return None

    try:
        if "script" in value:
            return Leaf.model_validate(dict(value))

        default = value.get("default")
        if default is not None and not isinstance(default, (str, Leaf)):
            if not (isinstance(default, Mapping) and "script" in default):
                raise ConfigValidationError(
                    f"{path}.default", "default must be a command or an object with a script"
                )
            default = Leaf.model_validate(dict(default))

        children = {key: child for key, child in value.items() if key not in RESERVED_KEYS}
        return Group(
            default=default,
            hidden_from_help=value.get("hiddenFromHelp", False),
            children=parse_script_tree(children, logger, path),
        )
    except ValidationError as error:
        raise ConfigValidationError(path, str(error)) from error
