"""
Shared test fixtures and utilities for the scriptree test suite.
"""

import sys

import pytest


@pytest.fixture
def python_command():
    """Build a shell command running a Python snippet with the current interpreter."""

    def build(code: str) -> str:
        return f'"{sys.executable}" -c "{code}"'

    return build


@pytest.fixture
def exit_command(python_command):
    """Build a shell command that exits with the given status."""

    def build(code: int, delay: float = 0) -> str:
        return python_command(f"import sys, time; time.sleep({delay}); sys.exit({code})")

    return build


@pytest.fixture
def help_tree():
    """Raw script tree covering leaves, groups, defaults and an unsupported value."""
    return {
        "foo": {
            "description": "the foo script",
            "script": 'echo "foo"',
        },
        "bar": {
            "default": {
                "description": "stuff",
                "script": 'echo "bar default"',
            },
            "baz": 'echo "baz"',
            "barBub": {
                "script": 'echo "barBub"',
            },
        },
        "build": {
            "default": "webpack",
            "x": {
                "default": {
                    "script": "webpack --env.x",
                    "description": "webpack with x env",
                },
                "y": {
                    "description": "build X-Y",
                    "script": 'echo "build x-y"',
                },
            },
        },
        "foobar": 'echo "foobar"',
        "extra": 42,
    }


@pytest.fixture
def lint_tree():
    """Raw script tree with nested and hidden scripts."""
    return {
        "test": 'echo "test script"',
        "lint": {
            "default": 'echo "lint.default"',
            "sub": {
                "thing": {
                    "description": "this is a description",
                    "script": 'echo "deeply nested thing"',
                },
                "hiddenThing": {
                    "hiddenFromHelp": True,
                    "script": 'echo "hidden"',
                },
            },
        },
    }
