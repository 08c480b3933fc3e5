"""Tests for the Greeting MCP CLI."""

import pytest
from click.testing import CliRunner

from greeting_mcp.cli import main


class TestCLI:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_init_creates_config_env(self, runner, tmp_data_dir):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "Greeting MCP initialized" in result.output
        content = (tmp_data_dir / "config.env").read_text()
        assert "# HF_TOKEN=" in content

    def test_init_preserves_existing_config(self, runner, tmp_data_dir):
        config_env = tmp_data_dir / "config.env"
        config_env.write_text("HF_TOKEN=hf_mine\n")

        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert config_env.read_text() == "HF_TOKEN=hf_mine\n"

    def test_capabilities(self, runner):
        result = runner.invoke(main, ["capabilities"])
        assert result.exit_code == 0
        assert "Tools (4):" in result.output
        assert "calculator" in result.output
        assert "server-spec://info" in result.output
        assert "code-review" in result.output

    def test_mcp_config(self, runner):
        result = runner.invoke(main, ["mcp-config"])
        assert result.exit_code == 0
        assert "mcpServers" in result.output
        assert "greeting-mcp" in result.output
