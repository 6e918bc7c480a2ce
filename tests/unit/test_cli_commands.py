"""Unit tests for the CLI — Typer command registration and output."""

from __future__ import annotations

from typer.testing import CliRunner

from featuremodel import __version__
from featuremodel.cli.app import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Test: CLI help and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "artifact" in result.output
        assert "prototype" in result.output
        assert "sort" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# Test: artifact command
# ---------------------------------------------------------------------------


class TestArtifactCommand:
    def test_shows_aliases_and_start_order(self):
        result = runner.invoke(
            app, ["artifact", "g:a:1.0", "--meta", "start-order=5", "--meta", "alias=g:b"]
        )
        assert result.exit_code == 0
        assert "g:b:0.0.0" in result.output
        assert "mvn:g/a/1.0" in result.output
        assert "5" in result.output

    def test_ids_are_printed_verbatim(self):
        result = runner.invoke(app, ["artifact", "g:a:1.0", "--meta", "alias=g:b:1.0"])
        assert result.exit_code == 0
        assert "g:a:1.0" in result.output
        assert "g:b:1.0" in result.output

    def test_invalid_start_order(self):
        result = runner.invoke(app, ["artifact", "g:a:1.0", "-m", "start-order=abc"])
        assert result.exit_code == 1
        assert "Invalid artifact" in result.output

    def test_invalid_id(self):
        result = runner.invoke(app, ["artifact", "nope"])
        assert result.exit_code == 1

    def test_bad_meta_pair(self):
        result = runner.invoke(app, ["artifact", "g:a:1.0", "--meta", "novalue"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Test: prototype command
# ---------------------------------------------------------------------------


class TestPrototypeCommand:
    def test_by_id_with_removals(self):
        result = runner.invoke(
            app,
            [
                "prototype",
                "--id", "g:base:1.0",
                "--remove-bundle", "g:b:1.0",
                "--remove-config", "my.pid",
                "--remove-extension-artifact", "content=g:c:1.0",
            ],
        )
        assert result.exit_code == 0
        assert "g:b:1.0" in result.output
        assert "my.pid" in result.output
        assert "content" in result.output

    def test_removals_with_brackets_are_printed_verbatim(self):
        result = runner.invoke(
            app,
            ["prototype", "--id", "g:a:1.0", "--remove-config", "a[b]", "--remove-extension", "[bold]x"],
        )
        assert result.exit_code == 0
        assert "a[b]" in result.output
        assert "[bold]x" in result.output
        assert "g:a:1.0" in result.output

    def test_by_url_without_removals(self):
        result = runner.invoke(app, ["prototype", "--url", "https://x.example/f.json"])
        assert result.exit_code == 0
        assert "No removals" in result.output

    def test_requires_exactly_one_source(self):
        neither = runner.invoke(app, ["prototype"])
        both = runner.invoke(app, ["prototype", "--id", "g:a:1.0", "--url", "https://x.example/f.json"])
        assert neither.exit_code == 2
        assert both.exit_code == 2

    def test_invalid_bundle(self):
        result = runner.invoke(app, ["prototype", "--id", "g:a:1.0", "--remove-bundle", "bad"])
        assert result.exit_code == 1
        assert "Invalid prototype" in result.output


# ---------------------------------------------------------------------------
# Test: sort command
# ---------------------------------------------------------------------------


class TestSortCommand:
    def test_sorts_by_version(self):
        result = runner.invoke(app, ["sort", "g:a:1.10.0", "g:a:1.9.0", "f:z:1"])
        assert result.exit_code == 0
        lines = [line.strip() for line in result.output.splitlines() if line.strip()]
        assert lines == ["f:z:1", "g:a:1.9.0", "g:a:1.10.0"]

    def test_shortcode_like_ids_are_not_rewritten(self):
        result = runner.invoke(app, ["sort", "g:b:1.0", "g:a:1.0"])
        assert result.exit_code == 0
        assert result.output.split() == ["g:a:1.0", "g:b:1.0"]

    def test_invalid_id(self):
        result = runner.invoke(app, ["sort", "g:a"])
        assert result.exit_code == 1
