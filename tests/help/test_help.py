"""
Tests for rendering the available scripts tree.
"""

from scriptree.core.config import ScriptsConfig
from scriptree.help import HEADER, NO_SCRIPTS, render_help


class TestRenderHelp:
    """Test the exact line content of the rendered tree."""

    def test_formats_a_nice_message(self, help_tree):
        expected = "\n".join(
            [
                "Available scripts (camel or kebab case accepted)",
                '├─ foo - the foo script - echo "foo"',
                '├─ bar - stuff - echo "bar default"',
                '│  ├─ bar.baz - echo "baz"',
                '│  └─ bar.barBub - echo "barBub"',
                "├─ build - webpack",
                "│  └─ build.x - webpack with x env - webpack --env.x",
                '│     └─ build.x.y - build X-Y - echo "build x-y"',
                '└─ foobar - echo "foobar"',
            ]
        )

        assert render_help(ScriptsConfig(scripts=help_tree)) == expected

    def test_returns_no_scripts_available(self):
        assert render_help(ScriptsConfig.from_raw({"scripts": {}})) == NO_SCRIPTS
        assert NO_SCRIPTS == "There are no scripts available"

    def test_hidden_entries_leave_no_trace(self):
        tree = {
            "visible": {"script": "echo visible", "description": "shown"},
            "secret": {"script": "echo classified", "description": "top secret", "hiddenFromHelp": True},
        }

        message = render_help(tree)

        assert message == f"{HEADER}\n└─ visible - shown - echo visible"
        assert "secret" not in message
        assert "classified" not in message

    def test_hidden_group_hides_its_children(self):
        tree = {
            "ci": {"hiddenFromHelp": True, "default": "make ci", "lint": "make lint"},
            "test": "make test",
        }

        assert render_help(tree) == f"{HEADER}\n└─ test - make test"

    def test_hidden_nested_entry(self, lint_tree):
        expected = "\n".join(
            [
                HEADER,
                '├─ test - echo "test script"',
                '└─ lint - echo "lint.default"',
                "   └─ lint.sub",
                '      └─ lint.sub.thing - this is a description - echo "deeply nested thing"',
            ]
        )

        assert render_help(lint_tree) == expected

    def test_group_without_default_shows_name_only(self):
        assert render_help({"g": {"a": "echo a"}}) == f"{HEADER}\n└─ g\n   └─ g.a - echo a"

    def test_only_hidden_entries(self):
        assert render_help({"x": {"script": "echo", "hiddenFromHelp": True}}) == NO_SCRIPTS
