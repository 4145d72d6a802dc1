"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from plainwiki.cli import cli


class TestServeCommand:
    """Tests for the serve command."""

    def test_starts_server_with_config(self, tmp_path: Path) -> None:
        """Load config, apply overrides and run the server."""
        config_file = tmp_path / "plainwiki.toml"
        config_file.write_text('[server]\nport = 9000\n\n[storage]\ndata_dir = "data"\n')

        runner = CliRunner()
        with patch("plainwiki.server.run_server") as run_server:
            result = runner.invoke(
                cli, ["serve", "-c", str(config_file), "--host", "0.0.0.0"]
            )

        assert result.exit_code == 0, result.output
        assert "Starting server on 0.0.0.0:9000" in result.output
        assert f"Data directory: {tmp_path / 'data'}" in result.output
        assert "Templates: bundled" in result.output

        run_server.assert_called_once()
        config = run_server.call_args.args[0]
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert run_server.call_args.kwargs["app"] is not None

    def test_data_dir_option_overrides_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "plainwiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("plainwiki.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "-d", str(tmp_path / "other")],
            )

        assert result.exit_code == 0, result.output
        config = run_server.call_args.args[0]
        assert config.storage.data_dir == tmp_path / "other"

    def test_fails_on_invalid_config(self, tmp_path: Path) -> None:
        """Exit with an error for invalid configuration values."""
        config_file = tmp_path / "plainwiki.toml"
        config_file.write_text('[server]\nport = "http"\n')

        runner = CliRunner()
        with patch("plainwiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid configuration: server.port must be an integer" in result.output
        run_server.assert_not_called()

    def test_fails_on_missing_templates(self, tmp_path: Path) -> None:
        """Exit before serving when templates cannot be loaded."""
        config_file = tmp_path / "plainwiki.toml"
        config_file.write_text("")
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "view.html").write_text("{{ page.title }}")

        runner = CliRunner()
        with patch("plainwiki.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "--templates-dir", str(templates)],
            )

        assert result.exit_code == 1
        assert "Failed to load templates" in result.output
        assert "edit.html" in result.output
        run_server.assert_not_called()

    def test_fails_on_unreadable_config(self, tmp_path: Path) -> None:
        """Report OS errors while reading the config as a clean error."""
        config_dir = tmp_path / "plainwiki.toml"
        config_dir.mkdir()

        runner = CliRunner()
        with patch("plainwiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_dir)])

        assert result.exit_code == 1
        assert "Error: Invalid configuration:" in result.output
        assert "Traceback" not in result.output
        run_server.assert_not_called()

    def test_reports_custom_templates_directory(self, tmp_path: Path) -> None:
        config_file = tmp_path / "plainwiki.toml"
        config_file.write_text("")
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "view.html").write_text("{{ page.title }}")
        (templates / "edit.html").write_text("{{ page.text }}")

        runner = CliRunner()
        with patch("plainwiki.server.run_server"):
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "--templates-dir", str(templates)],
            )

        assert result.exit_code == 0, result.output
        assert f"Templates: {templates}" in result.output

    def test_fails_on_missing_config_file(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "-c", str(tmp_path / "nonexistent.toml")])

        assert result.exit_code != 0
