"""
Greeting MCP capabilities

Modules:
  basic_tools  — greeting, calculator, korea-time
  image_tools  — generate-image (Hugging Face)
  prompts      — code-review prompt
  resources    — server-spec document
"""

from typing import Optional

from greeting_mcp.config import Config
from greeting_mcp.providers.huggingface import ImageGenerator
from greeting_mcp.server.registry import CapabilityRegistry
from greeting_mcp.tools import basic_tools, image_tools, prompts, resources


def default_image_generator() -> ImageGenerator:
    return ImageGenerator(
        Config.HF_TOKEN,
        model=Config.IMAGE_MODEL,
        steps=Config.IMAGE_STEPS,
        timeout=Config.IMAGE_TIMEOUT,
    )


def register_all(
    registry: CapabilityRegistry,
    image_generator: Optional[ImageGenerator] = None,
) -> CapabilityRegistry:
    """Register every built-in tool, prompt and resource."""
    basic_tools.register(registry)
    image_tools.register(registry, image_generator or default_image_generator())
    prompts.register(registry)
    resources.register(registry)
    return registry
