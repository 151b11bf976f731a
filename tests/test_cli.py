"""Tests for the stache command line."""

import pytest
import yaml
from typer.testing import CliRunner

from stachecli.main import typer_app
from stachecli._version import __version__

runner = CliRunner()


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<h1>{{ .text }}</h1>{{ missing }}")
    return path


@pytest.fixture
def data(tmp_path):
    path = tmp_path / "data.yaml"
    path.write_text(yaml.safe_dump({"text": "data text"}))
    return path


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep a stache.yaml from the real working tree out of the tests."""
    monkeypatch.chdir(tmp_path)


# =============================================================================
# render
# =============================================================================


class TestRender:
    def test_render_with_data_file(self, page, data):
        result = runner.invoke(typer_app, ["render", str(page), "-d", str(data)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "<h1>data text</h1>"

    def test_render_with_set(self, page):
        result = runner.invoke(typer_app, ["render", str(page), "-s", "text=hi"])
        assert result.exit_code == 0, result.output
        assert result.stdout == "<h1>hi</h1>"

    def test_render_from_stdin(self):
        result = runner.invoke(
            typer_app,
            ["render", "-", "-s", "user.name=Ada"],
            input="Hello {{ user.name }}!",
        )
        assert result.exit_code == 0, result.output
        assert result.stdout == "Hello Ada!"

    def test_render_html_formatter(self, page):
        result = runner.invoke(
            typer_app, ["render", str(page), "-e", "html", "-s", "text=<b>"]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout == "<h1>&lt;b&gt;</h1>"

    def test_render_to_output_file(self, tmp_path, page, data):
        out = tmp_path / "out" / "page.html"
        result = runner.invoke(
            typer_app, ["render", str(page), "-d", str(data), "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text() == "<h1>data text</h1>"

    def test_render_strict_fails_on_missing(self, page, data):
        result = runner.invoke(
            typer_app, ["render", str(page), "-d", str(data), "--strict"]
        )
        assert result.exit_code == 1
        assert "Missing field: missing" in result.output

    def test_config_file_is_applied(self, tmp_path, page):
        (tmp_path / "stache.yaml").write_text(
            yaml.safe_dump(
                {"formatter": "urlize", "defaults": {"text": "Vim (text editor)"}}
            )
        )
        result = runner.invoke(typer_app, ["render", str(page)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "<h1>vim-text-editor</h1>"

    def test_lenient_flag_overrides_config(self, tmp_path, page):
        (tmp_path / "stache.yaml").write_text("strict: true\n")
        result = runner.invoke(typer_app, ["render", str(page), "--lenient"])
        assert result.exit_code == 0, result.output
        assert result.stdout == "<h1></h1>"

    def test_invalid_config(self, tmp_path, page):
        (tmp_path / "stache.yaml").write_text("formatter: shout\n")
        result = runner.invoke(typer_app, ["render", str(page)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_unknown_formatter_flag(self, page):
        result = runner.invoke(typer_app, ["render", str(page), "-e", "shout"])
        assert result.exit_code == 1
        assert "Unknown formatter" in result.output

    def test_non_scalar_field(self, tmp_path):
        template = tmp_path / "list.txt"
        template.write_text("{{ items }}")
        data = tmp_path / "data.json"
        data.write_text('{"items": [1, 2]}')
        result = runner.invoke(typer_app, ["render", str(template), "-d", str(data)])
        assert result.exit_code == 1
        assert "items" in result.output

    def test_yaml_dates_render_as_iso(self, tmp_path):
        template = tmp_path / "post.md"
        template.write_text("{{ title }} ({{ date }}, updated {{ updated }})")
        data = tmp_path / "front.yaml"
        data.write_text(
            "title: Release\ndate: 2024-01-15\nupdated: 2024-01-16 08:30:00\n"
        )
        result = runner.invoke(typer_app, ["render", str(template), "-d", str(data)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "Release (2024-01-15, updated 2024-01-16T08:30:00)"

    def test_directory_as_template(self, tmp_path):
        result = runner.invoke(typer_app, ["render", str(tmp_path)])
        assert result.exit_code == 1
        assert "Template is not a file" in result.output
        assert "Unexpected error" not in result.output

    def test_syntax_error_reports_position(self, tmp_path):
        template = tmp_path / "bad.txt"
        template.write_text("line\n  {{ oops")
        result = runner.invoke(typer_app, ["render", str(template)])
        assert result.exit_code == 1
        assert "bad.txt:2:3" in result.output
        assert "Unterminated placeholder" in result.output

    def test_missing_template(self, tmp_path):
        result = runner.invoke(typer_app, ["render", str(tmp_path / "nope.html")])
        assert result.exit_code == 1
        assert "Template not found" in result.output


# =============================================================================
# check / tokens / version
# =============================================================================


class TestCheck:
    def test_check_lists_fields(self, tmp_path):
        template = tmp_path / "t.txt"
        template.write_text("{{ a }} {{ b.c }} {{ a }}")
        result = runner.invoke(typer_app, ["check", str(template)])
        assert result.exit_code == 0, result.output
        assert "OK (2 fields)" in result.stdout
        assert "  a\n" in result.stdout
        assert "  b.c\n" in result.stdout

    def test_check_invalid_path(self, tmp_path):
        template = tmp_path / "t.txt"
        template.write_text("{{ a..b }}")
        result = runner.invoke(typer_app, ["check", str(template)])
        assert result.exit_code == 1
        assert "Invalid field path" in result.output


class TestTokens:
    def test_tokens_table(self, tmp_path):
        template = tmp_path / "t.txt"
        template.write_text("Hi {{ name }}")
        result = runner.invoke(typer_app, ["tokens", str(template)])
        assert result.exit_code == 0, result.output
        assert "literal" in result.stdout
        assert "placeholder" in result.stdout
        assert "name" in result.stdout

    def test_tokens_empty_placeholder(self, tmp_path):
        template = tmp_path / "t.txt"
        template.write_text("{{ }}")
        result = runner.invoke(typer_app, ["tokens", str(template)])
        assert result.exit_code == 1
        assert "Empty placeholder" in result.output


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_version_matches_library():
    import stache

    result = runner.invoke(typer_app, ["--version"])
    assert result.stdout.strip() == f"stache {stache.__version__}"
