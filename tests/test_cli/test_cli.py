"""Tests for CLI commands."""

import json

import pytest
from click.testing import CliRunner

from tw2css.cli import cli
from tw2css.config import hierarchy


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "home" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "tw2css" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestConvertCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["convert", "--help"])
        assert result.exit_code == 0
        assert "--resolver" in result.output
        assert "--styles-file" in result.output
        assert "--json" in result.output

    def test_converts_arguments(self, runner):
        result = runner.invoke(cli, ["convert", "bg-blue-500", "text-white", "p-4", "--no-highlight"])
        assert result.exit_code == 0
        assert (
            ".element {\n"
            "  background-color: rgb(59, 130, 246);\n"
            "  color: rgb(255, 255, 255);\n"
            "  padding: 16px;\n"
            "}"
        ) in result.output

    def test_reads_stdin(self, runner):
        result = runner.invoke(cli, ["convert", "--no-highlight"], input="p-4\n")
        assert result.exit_code == 0
        assert "padding: 16px;" in result.output

    def test_warnings_reported(self, runner):
        result = runner.invoke(cli, ["convert", "invalid-class-name", "--no-highlight"])
        assert result.exit_code == 0
        assert "No styles generated" in result.output
        assert "Warning" in result.output

    def test_rejected_input_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["convert", "javascript:alert(1)", "--no-highlight"])
        assert result.exit_code == 1
        assert "unsafe" in result.output

    def test_max_input_length_option(self, runner):
        result = runner.invoke(cli, ["convert", "p-4 m-2", "--max-input-length", "3"])
        assert result.exit_code == 1
        assert "Input too long" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["convert", "p-4", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["css"] == ".element {\n  padding: 16px;\n}"
        assert data["error"] is None
        assert data["warnings"] == []

    def test_json_error(self, runner):
        result = runner.invoke(cli, ["convert", "<script>", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error_kind"] == "unsafe_content"
        assert data["css"] == ""

    def test_styles_file(self, runner, sample_style_table):
        result = runner.invoke(
            cli,
            ["convert", "flex", "--styles-file", str(sample_style_table), "--no-highlight"],
        )
        assert result.exit_code == 0
        assert "display: flex;" in result.output

    def test_nonexistent_styles_file(self, runner):
        result = runner.invoke(cli, ["convert", "p-4", "--styles-file", "missing.yaml"])
        assert result.exit_code != 0

    def test_invalid_styles_file(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("foo: bar\n")
        result = runner.invoke(cli, ["convert", "p-4", "--styles-file", str(path)])
        assert result.exit_code == 2
        assert "Error" in result.output

    def test_blank_input(self, runner):
        result = runner.invoke(cli, ["convert", "--no-highlight"], input="   \n")
        assert result.exit_code == 0
        assert result.output.strip() == ""


class TestReplCommand:
    def test_converts_lines_and_reports_status(self, runner, monkeypatch):
        monkeypatch.setenv("TW2CSS_SYNTAX_HIGHLIGHTING", "0")
        result = runner.invoke(
            cli,
            ["repl"],
            input=":status\np-4\n  p-4  \n:status\n:reset\n:status\n:quit\nm-2\n",
        )
        assert result.exit_code == 0
        assert result.output.count("padding: 16px;") == 2
        assert "Cache: 0/50 entries, 0 hits, 0 misses" in result.output
        assert "Cache: 1/50 entries, 1 hits, 1 misses" in result.output
        assert "Cache cleared." in result.output
        assert "margin" not in result.output

    def test_reports_errors_and_continues(self, runner, monkeypatch):
        monkeypatch.setenv("TW2CSS_SYNTAX_HIGHLIGHTING", "0")
        result = runner.invoke(cli, ["repl"], input="<script>\np-4\n")
        assert result.exit_code == 0
        assert "unsafe" in result.output
        assert "padding: 16px;" in result.output

    def test_last_line_without_newline(self, runner, monkeypatch):
        monkeypatch.setenv("TW2CSS_SYNTAX_HIGHLIGHTING", "0")
        result = runner.invoke(cli, ["repl"], input="m-2\np-4")
        assert result.exit_code == 0
        assert "margin: 8px;" in result.output
        assert "padding: 16px;" in result.output

    def test_unknown_resolver(self, runner, monkeypatch):
        monkeypatch.setenv("TW2CSS_RESOLVER", "magic")
        result = runner.invoke(cli, ["repl"], input="p-4\n")
        assert result.exit_code == 2
        assert "Unknown resolver" in result.output

    def test_missing_styles_file_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("TW2CSS_STYLES_FILE", "missing.yaml")
        result = runner.invoke(cli, ["repl"], input="p-4\n")
        assert result.exit_code == 2
        assert "Style table not found" in result.output


class TestPropertiesCommand:
    def test_lists_properties(self, runner):
        result = runner.invoke(cli, ["properties"])
        assert result.exit_code == 0
        assert "Output Properties" in result.output
        assert "Layout" in result.output
        assert "display" in result.output
