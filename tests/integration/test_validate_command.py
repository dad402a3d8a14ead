"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end:
- Valid configuration files pass validation
- Syntax, schema and limit errors fail with exit code 1
- Layout advisories are shown as warnings with exit code 2
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from modulecad.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_carcass_config(self, runner: CliRunner) -> None:
        """A complete carcass config passes with exit code 0."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "carcass_full.json")]
        )

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_wardrobe_config(self, runner: CliRunner) -> None:
        """Presets supply the materials the wardrobe file leaves out."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "wardrobe_loft.json")]
        )

        assert result.exit_code == 0

    def test_minimal_config_warns_about_name(self, runner: CliRunner) -> None:
        """A config naming only its unit type is valid with a warning."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "minimal.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "name: Name not specified" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_layout_warnings(self, runner: CliRunner) -> None:
        """Extra sections and out-of-range shelf positions are warnings."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "sections[0].shelfPositions[0]" in result.output
        assert "Add center posts or remove sections" in result.output

    def test_out_of_range(self, runner: CliRunner) -> None:
        """A width over the product limit fails with exit code 1."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "out_of_range.json")]
        )

        assert result.exit_code == 1
        assert "widthMm: widthMm must be at most 10000mm" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with the line of the problem."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_json.json")]
        )

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 6" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        """Unknown fields should cause validation failure."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "unknown_field.json")]
        )

        assert result.exit_code == 1
        assert "module.colour" in result.output
