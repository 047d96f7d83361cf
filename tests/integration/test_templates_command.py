"""Integration tests for the templates CLI commands.

These tests verify the templates commands work correctly end-to-end:
- Listing starter configurations and gallery templates
- Initializing configuration files from starters
- Overwrite protection
- Error handling for unknown starters
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gallerywall.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for the templates list command."""

    def test_lists_starters_and_gallery_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])
        assert result.exit_code == 0
        assert "Starter configurations:" in result.output
        assert "above-sofa" in result.output
        assert "Gallery templates" in result.output
        assert "triptych" in result.output
        assert "(6 frames)" in result.output


class TestTemplatesInit:
    """Tests for the templates init command."""

    def test_creates_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "living-room.json"
        result = runner.invoke(app, ["templates", "init", "above-sofa", "-o", str(output)])
        assert result.exit_code == 0
        assert f"Created: {output}" in result.output
        assert output.exists()

    def test_created_file_validates(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "salon.json"
        runner.invoke(app, ["templates", "init", "salon", "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])
        assert result.exit_code == 0

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "grid.json"
        output.write_text("keep me")

        result = runner.invoke(app, ["templates", "init", "grid", "-o", str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text() == "keep me"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "grid.json"
        output.write_text("replace me")

        result = runner.invoke(
            app, ["templates", "init", "grid", "-o", str(output), "--force"]
        )
        assert result.exit_code == 0
        assert output.read_text() != "replace me"

    def test_unknown_template(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "mosaic", "-o", str(tmp_path / "x.json")]
        )
        assert result.exit_code == 1
        assert "Template not found: mosaic" in result.output
        assert "Available templates: row, grid" in result.output
