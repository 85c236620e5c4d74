"""Unit tests for the main CLI application."""

import logging

from condastate import __version__
from condastate.cli import types
from condastate.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options and command registration."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"condastate version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """All commands are registered."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("list", "envs", "query", "latest", "install", "update", "remove", "ensure"):
            assert command in result.stdout

    def test_verbose_enables_debug_logging(self, machine) -> None:
        """--verbose lowers the log level to DEBUG."""
        result = runner.invoke(app, ["--verbose", "envs"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_default_log_level(self, machine) -> None:
        """Without --verbose only warnings are logged."""
        result = runner.invoke(app, ["envs"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.WARNING

    def test_config_option_is_passed_through(self, machine, tmp_path) -> None:
        """--config selects the file handed to load_config."""
        path = tmp_path / "config.toml"
        result = runner.invoke(app, ["--config", str(path), "envs"])

        assert result.exit_code == 0
        types.load_config.assert_called_once_with(path)  # type: ignore[attr-defined]
