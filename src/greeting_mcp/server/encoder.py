"""
Result Encoder — domain results to uniform response envelopes

Handlers return plain domain values:
  str                  -> one Text block
  ImageArtifact        -> one Image block (base64, fully in memory)
  list[PromptMessage]  -> ordered Message blocks

The Dispatcher hands whatever it gets to encode() and never looks at the
concrete shape itself.
"""

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from greeting_mcp.server.protocol import (
    image_content,
    prompt_get_result,
    resource_read_result,
    text_content,
    tool_result_content,
)

ERROR_MARKER = "Error"


# -- domain results --

@dataclass(frozen=True)
class ImageArtifact:
    data: bytes
    mime_type: str = "image/png"
    annotations: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class PromptMessage:
    role: str
    text: str


# -- content blocks --

@dataclass(frozen=True)
class TextBlock:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return text_content(self.text)


@dataclass(frozen=True)
class ImageBlock:
    data: str
    mime_type: str

    def to_dict(self) -> Dict[str, Any]:
        return image_content(self.data, self.mime_type)


@dataclass(frozen=True)
class MessageBlock:
    role: str
    content: TextBlock

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content.to_dict()}


ContentBlock = Union[TextBlock, ImageBlock, MessageBlock]


@dataclass
class Envelope:
    """Ordered content blocks for one invocation, tagged with its request id."""

    request_id: Any
    blocks: List[ContentBlock]
    annotations: Optional[Dict[str, Any]] = None
    error_kind: Optional[str] = None
    error: Optional[Exception] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.blocks:
            raise ValueError("Envelope needs at least one content block")

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    @property
    def text(self) -> str:
        """All text carried by the envelope, joined by newlines."""
        parts = []
        for block in self.blocks:
            if isinstance(block, TextBlock):
                parts.append(block.text)
            elif isinstance(block, MessageBlock):
                parts.append(block.content.text)
        return "\n".join(parts)

    def content(self) -> List[Dict[str, Any]]:
        return [block.to_dict() for block in self.blocks]

    def to_tool_result(self) -> Dict[str, Any]:
        return tool_result_content(self.content(), is_error=self.is_error, annotations=self.annotations)

    def to_prompt_result(self, description: Optional[str] = None) -> Dict[str, Any]:
        return prompt_get_result(self.content(), description)

    def to_resource_result(self, uri: str, mime_type: str) -> Dict[str, Any]:
        return resource_read_result([{"uri": uri, "mimeType": mime_type, "text": self.text}])


def encode(result: Any) -> List[ContentBlock]:
    """Map a handler's domain result to content blocks."""
    if isinstance(result, str):
        return [TextBlock(result)]

    if isinstance(result, ImageArtifact):
        return [ImageBlock(base64.b64encode(result.data).decode("ascii"), result.mime_type)]

    if isinstance(result, PromptMessage):
        result = [result]

    if isinstance(result, Sequence) and result and all(isinstance(m, PromptMessage) for m in result):
        return [MessageBlock(m.role, TextBlock(m.text)) for m in result]

    raise TypeError(f"Cannot encode handler result of type {type(result).__name__}")


def success_envelope(request_id: Any, result: Any) -> Envelope:
    annotations = result.annotations if isinstance(result, ImageArtifact) else None
    return Envelope(request_id, encode(result), annotations=annotations)


def error_envelope(request_id: Any, kind: str, error: Exception) -> Envelope:
    message = getattr(error, "message", None) or str(error)
    return Envelope(
        request_id,
        [TextBlock(f"{ERROR_MARKER} [{kind}]: {message}")],
        error_kind=kind,
        error=error,
    )
