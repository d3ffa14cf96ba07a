"""
Tests for the command line entry point.
"""

import textwrap

import pytest

from scriptree.cli import build_parser, main


@pytest.fixture
def project(tmp_path, monkeypatch, exit_command, python_command):
    """A working directory holding a package-scripts.py config."""
    argc = python_command("import sys; sys.exit(len(sys.argv))")
    (tmp_path / "package-scripts.py").write_text(
        textwrap.dedent(
            f"""
            scripts = {{
                "ok": {exit_command(0)!r},
                "fail": {{"script": {exit_command(3)!r}, "description": "always fails"}},
                "argc": {argc!r},
                "debug": {argc!r},
                "killed": "kill -TERM $$",
            }}
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestBuildParser:
    def test_script_and_passthrough(self):
        namespace = build_parser().parse_args(["-s", "boo", "--watch", "--verbose"])
        assert namespace.script == "boo"
        assert namespace.args == ["--watch", "--verbose"]
        assert namespace.silent is True

    def test_parallel(self):
        namespace = build_parser().parse_args(["-p", "a,b"])
        assert namespace.parallel == "a,b"
        assert namespace.script is None


class TestMain:
    """Test exit statuses and output of the CLI."""

    def test_runs_script(self, project):
        assert main(["ok"]) == 0

    def test_returns_script_exit_code(self, project):
        assert main(["fail"]) == 3

    def test_passes_args_through(self, project):
        assert main(["argc", "a", "b", "c"]) == 4

    def test_parallel_returns_first_failure(self, project):
        assert main(["-p", "fail,ok"]) == 3

    def test_comma_list(self, project):
        assert main(["ok,fail"]) == 3

    def test_prints_help_without_scripts(self, project, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Available scripts (camel or kebab case accepted)")
        assert "├─ fail - always fails - " in out

    def test_missing_script(self, project, capsys):
        assert main(["nope"]) == 1

        assert 'There is no script that can be resolved from "nope"' in capsys.readouterr().err

    def test_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["ok"]) == 1

    def test_explicit_yaml_config(self, tmp_path, monkeypatch, exit_command):
        (tmp_path / "scripts.yml").write_text(
            f"scripts:\n  build:\n    default: '{exit_command(5)}'\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert main(["-c", "scripts.yml", "build"]) == 5

    def test_preloads_modules(self, project, capsys):
        (project / "setup_env.py").write_text("print('preloaded')\n", encoding="utf-8")

        assert main(["-r", "./setup_env.py", "ok"]) == 0
        assert "preloaded" in capsys.readouterr().out

    def test_option_value_matching_script_name_is_not_passed_through(self, project):
        # Without arguments the child's sys.argv is ["-c"]
        assert main(["-l", "debug", "debug"]) == 1

    def test_signal_killed_script_reports_shell_status(self, project):
        assert main(["killed"]) == 143
