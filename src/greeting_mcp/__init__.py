"""Greeting MCP Server — tools, resources and prompts over raw stdio MCP."""

__version__ = "1.0.0"
