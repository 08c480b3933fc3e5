"""
Image Tools — text-to-image generation

Tools:
  generate-image  — Generate a PNG from a text prompt (FLUX.1-schnell)
"""

from typing import Any, Dict

from greeting_mcp.providers.huggingface import ImageGenerator
from greeting_mcp.server.encoder import ImageArtifact
from greeting_mcp.server.registry import CapabilityRegistry
from greeting_mcp.server.schema import STRING, Param, ParameterSchema

MISSING_TOKEN = (
    "❌ Error: the HF_TOKEN environment variable is not set. "
    "A Hugging Face API token is required to generate images."
)

IMAGE_ANNOTATIONS = {"audience": ["user"], "priority": 0.9}

GENERATE_IMAGE_SCHEMA = ParameterSchema.of(
    Param("prompt", STRING, "Text prompt describing the image to generate"),
)


def register(registry: CapabilityRegistry, generator: ImageGenerator):
    @registry.tool("generate-image", "Generates an image from a text prompt.", GENERATE_IMAGE_SCHEMA)
    async def generate_image(args: Dict[str, Any]):
        # Missing credential is user guidance, not a fault
        if not generator.configured:
            return MISSING_TOKEN

        data = await generator.generate(args["prompt"])
        return ImageArtifact(data, "image/png", annotations=dict(IMAGE_ANNOTATIONS))
