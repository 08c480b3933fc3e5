"""
Greeting MCP CLI

Commands:
    greeting-mcp init          Create ~/.greeting-mcp/ and generate config
    greeting-mcp server        Start the MCP server (stdio mode)
    greeting-mcp capabilities  List registered tools, resources and prompts
    greeting-mcp mcp-config    Print Claude Desktop/Code JSON config
"""

import asyncio
import json
import shutil
import sys

import click

from greeting_mcp import __version__
from greeting_mcp.config import Config


def _build_registry():
    from greeting_mcp.server.registry import CapabilityRegistry
    from greeting_mcp.tools import register_all

    return register_all(CapabilityRegistry())


@click.group()
@click.version_option(version=__version__, prog_name="greeting-mcp")
def main():
    """Greeting MCP Server — tools, resources and prompts over stdio."""
    pass


@main.command()
def init():
    """Create the data directory and a commented config.env."""
    Config.ensure_dirs()

    config_env = Config.DATA_DIR / "config.env"
    if not config_env.exists():
        config_env.write_text(
            "# Greeting MCP Configuration\n"
            "# Uncomment and edit as needed.\n"
            "\n"
            "# HF_TOKEN=hf_xxx\n"
            "# GREETING_MCP_LOG_LEVEL=INFO\n"
            "# GREETING_MCP_IMAGE_TIMEOUT=120\n"
        )

    click.echo(f"Greeting MCP initialized at {Config.DATA_DIR}")
    click.echo(f"  Config: {config_env}")
    click.echo(f"  Logs:   {Config.LOG_DIR}")
    click.echo()
    click.echo("Set HF_TOKEN in config.env to enable generate-image.")
    click.echo("Run `greeting-mcp mcp-config` to get the JSON snippet.")


@main.command()
def server():
    """Start the MCP server (stdio mode)."""
    from greeting_mcp.server.server import CapabilityHost

    async def _run():
        await CapabilityHost(_build_registry()).run()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass


@main.command()
def capabilities():
    """List registered tools, resources and prompts."""
    from greeting_mcp.server.registry import CapabilityKind

    registry = _build_registry()
    for kind in CapabilityKind:
        descriptors = registry.list(kind)
        click.echo(f"{kind.value.capitalize()}s ({len(descriptors)}):")
        for d in descriptors:
            click.echo(f"  {d.key}: {d.description}")

    if not Config.HF_TOKEN:
        click.echo()
        click.echo("HF_TOKEN is not set — generate-image will only return setup guidance.")


@main.command("mcp-config")
def mcp_config():
    """Print MCP config JSON for Claude Desktop or Claude Code."""
    path = shutil.which("greeting-mcp")
    if path:
        server_cfg = {"command": path, "args": ["server"]}
    else:
        server_cfg = {"command": sys.executable, "args": ["-m", "greeting_mcp", "server"]}

    config = {"mcpServers": {"greeting-mcp": server_cfg}}

    click.echo("Add this to your Claude settings:\n")
    click.echo(json.dumps(config, indent=2))
    click.echo()
    click.echo("Claude Desktop: Settings > Developer > Edit Config")
    click.echo("Claude Code:    .claude/settings.json or ~/.claude/settings.json")


if __name__ == "__main__":
    main()
