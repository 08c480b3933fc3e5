"""External providers reachable from tool handlers."""

from greeting_mcp.providers.huggingface import ImageGenerator

__all__ = ["ImageGenerator"]
