"""Greeting MCP Server — Raw protocol implementation."""

from greeting_mcp.server.dispatcher import Dispatcher, InvocationRequest
from greeting_mcp.server.registry import CapabilityKind, CapabilityRegistry
from greeting_mcp.server.router import Router
from greeting_mcp.server.server import CapabilityHost

__all__ = [
    "CapabilityHost",
    "CapabilityKind",
    "CapabilityRegistry",
    "Dispatcher",
    "InvocationRequest",
    "Router",
]
