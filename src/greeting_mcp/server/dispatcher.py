"""
Dispatcher — resolve, validate, execute, encode

One call to dispatch() handles one invocation end to end and always
returns an Envelope. A handler fault is caught here and reported as an
execution_failed envelope; it never reaches the channel as an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from greeting_mcp.server.encoder import Envelope, error_envelope, success_envelope
from greeting_mcp.server.errors import (
    EXECUTION_FAILED,
    INVALID_ARGUMENTS,
    UNKNOWN_CAPABILITY,
    ExecutionError,
    UnknownCapabilityError,
    ValidationError,
)
from greeting_mcp.server.logger import get_logger
from greeting_mcp.server.registry import CapabilityKind, CapabilityRegistry
from greeting_mcp.server.schema import validate

log = get_logger("dispatcher")


@dataclass
class InvocationRequest:
    request_id: Any
    kind: CapabilityKind
    name: str
    raw_args: Dict[str, Any] = field(default_factory=dict)


class Dispatcher:
    def __init__(self, registry: CapabilityRegistry):
        self._registry = registry

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    async def dispatch(self, request: InvocationRequest) -> Envelope:
        label = f"{request.kind.value} {request.name}"

        try:
            descriptor = self._registry.resolve(request.kind, request.name)
        except UnknownCapabilityError as exc:
            log.warning(f"[{request.request_id}] {exc.message}")
            return error_envelope(request.request_id, UNKNOWN_CAPABILITY, exc)

        try:
            args = validate(descriptor.schema, request.raw_args)
        except ValidationError as exc:
            log.warning(f"[{request.request_id}] {label}: {exc.message}")
            return error_envelope(request.request_id, INVALID_ARGUMENTS, exc)

        log.debug(f"[{request.request_id}] {label} args={sorted(args)}")

        try:
            result = await descriptor.handler(args)
            envelope = success_envelope(request.request_id, result)
        except Exception as exc:
            error = ExecutionError(request.name, exc)
            log.error(f"[{request.request_id}] {label} ({error.cause}): {error.message}", exc_info=True)
            return error_envelope(request.request_id, EXECUTION_FAILED, error)

        log.info(f"[{request.request_id}] {label} ok ({len(envelope.blocks)} blocks)")
        return envelope
