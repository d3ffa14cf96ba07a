"""
Script name normalization and tree lookup.

Script names may be written in camelCase or kebab-case, both in the
configuration and on the command line. Every lookup goes through
`normalize_name` so that ``barBub``, ``bar-bub`` and ``bar_bub`` address the
same entry.
"""

from collections.abc import Mapping
from typing import Any

from inflection import dasherize, underscore


def normalize_name(name: str) -> str:
    """
    Convert a script name to its canonical kebab-case form.

    Params:
        name: Script name in any of camelCase, kebab-case or snake_case

    Returns:
        Lower-cased, hyphen-delimited name

    Examples:
        "barBub" -> "bar-bub"
        "bar-bub" -> "bar-bub"
        "HTTPServer" -> "http-server"
    """
    return dasherize(underscore(name))


def find_child_key(tree: Mapping[str, Any], name: str) -> str | None:
    """
    Find the key of ``tree`` that ``name`` refers to.

    An exact key match wins; otherwise the first key with the same
    normalized form is returned.

    Params:
        tree: Mapping of configured names to nodes
        name: Requested name, in any accepted case style

    Returns:
        The configured key, or None when nothing matches
    """
    if name in tree:
        return name

    canonical = normalize_name(name)
    for key in tree:
        if normalize_name(key) == canonical:
            return key
    return None


def get_child(tree: Mapping[str, Any], name: str) -> Any | None:
    """Return the node ``name`` refers to in ``tree``, or None."""
    key = find_child_key(tree, name)
    if key is None:
        return None
    return tree[key]
