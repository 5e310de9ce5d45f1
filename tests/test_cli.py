"""Tests for cli module."""

from typer.testing import CliRunner

from ReTree.cli import app

runner = CliRunner()


class TestCli:
    def test_stdin(self):
        result = runner.invoke(app, [], input="- root\n    - a\n    - b\n")
        assert result.exit_code == 0
        assert result.stdout == "root\n  ├── a\n  └── b\n"

    def test_file(self, tmp_path):
        source = tmp_path / "outline.txt"
        source.write_text("- root\n    - child\n", encoding="utf-8")
        result = runner.invoke(app, [str(source)])
        assert result.exit_code == 0
        assert "  └── child" in result.stdout

    def test_format_error(self):
        result = runner.invoke(app, [], input="- a\n- b\n")
        assert result.exit_code == 1
        assert "format error." in result.output

    def test_empty_input(self):
        result = runner.invoke(app, [], input="   \n")
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.txt")])
        assert result.exit_code == 2
