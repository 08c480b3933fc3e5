"""
Capability Registry — named tools, resources and prompts with bound handlers

Populated once at startup, sealed before the first request, read-only
while requests are dispatched.
"""

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Tuple

from greeting_mcp.server.errors import DuplicateNameError, UnknownCapabilityError
from greeting_mcp.server.logger import get_logger
from greeting_mcp.server.schema import EMPTY_SCHEMA, ParameterSchema

log = get_logger("registry")

Handler = Callable[[Dict[str, Any]], Awaitable[Any]]


class CapabilityKind(str, enum.Enum):
    TOOL = "tool"
    RESOURCE = "resource"
    PROMPT = "prompt"


@dataclass(frozen=True)
class CapabilityDescriptor:
    kind: CapabilityKind
    name: str
    description: str
    schema: ParameterSchema
    handler: Handler
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """Lookup key within the kind: the URI for resources, else the name."""
        if self.kind is CapabilityKind.RESOURCE:
            return self.metadata.get("uri", self.name)
        return self.name

    def declaration(self) -> Dict[str, Any]:
        """The shape advertised to the client in the */list methods."""
        if self.kind is CapabilityKind.TOOL:
            decl = {
                "name": self.name,
                "description": self.description,
                "inputSchema": self.schema.to_json_schema(),
            }
            if "title" in self.metadata:
                decl["title"] = self.metadata["title"]
            return decl
        if self.kind is CapabilityKind.RESOURCE:
            return {
                "uri": self.key,
                "name": self.name,
                "description": self.description,
                "mimeType": self.metadata.get("mimeType", "text/plain"),
            }
        return {
            "name": self.name,
            "description": self.description,
            "arguments": self.schema.to_prompt_arguments(),
        }


class CapabilityRegistry:
    """Append-only mapping of (kind, key) to descriptor."""

    def __init__(self):
        self._entries: Dict[Tuple[CapabilityKind, str], CapabilityDescriptor] = {}
        self._sealed = False

    def register(
        self,
        kind: CapabilityKind,
        name: str,
        description: str,
        handler: Handler,
        schema: ParameterSchema = EMPTY_SCHEMA,
        **metadata: Any,
    ) -> CapabilityDescriptor:
        if self._sealed:
            raise RuntimeError(f"Registry is sealed; cannot register {kind.value} {name}")

        descriptor = CapabilityDescriptor(
            kind=kind,
            name=name,
            description=description,
            schema=schema,
            handler=handler,
            metadata=MappingProxyType(dict(metadata)),
        )
        key = (kind, descriptor.key)
        if key in self._entries:
            raise DuplicateNameError(kind.value, descriptor.key)

        self._entries[key] = descriptor
        log.debug(f"Registered {kind.value}: {descriptor.key}")
        return descriptor

    def tool(self, name: str, description: str, schema: ParameterSchema = EMPTY_SCHEMA, **metadata):
        """Decorator form of register() for tools."""
        def decorator(handler: Handler) -> Handler:
            self.register(CapabilityKind.TOOL, name, description, handler, schema, **metadata)
            return handler
        return decorator

    def prompt(self, name: str, description: str, schema: ParameterSchema = EMPTY_SCHEMA):
        def decorator(handler: Handler) -> Handler:
            self.register(CapabilityKind.PROMPT, name, description, handler, schema)
            return handler
        return decorator

    def resource(self, uri: str, name: str, description: str, mime_type: str = "text/plain"):
        def decorator(handler: Handler) -> Handler:
            self.register(
                CapabilityKind.RESOURCE, name, description, handler,
                uri=uri, mimeType=mime_type,
            )
            return handler
        return decorator

    def resolve(self, kind: CapabilityKind, name: str) -> CapabilityDescriptor:
        try:
            return self._entries[(kind, name)]
        except KeyError:
            raise UnknownCapabilityError(kind.value, name) from None

    def list(self, kind: CapabilityKind) -> List[CapabilityDescriptor]:
        return [d for (k, _), d in self._entries.items() if k is kind]

    def count(self, kind: CapabilityKind) -> int:
        return len(self.list(kind))

    def seal(self):
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed
