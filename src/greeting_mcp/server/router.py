"""
Method Router — Map MCP methods onto the Dispatcher

Routes:
  initialize       -> server capabilities handshake
  initialized      -> notification (no response)
  ping             -> pong
  tools/list       -> registered tool declarations
  tools/call       -> dispatch, rendered as a tool result
  resources/list   -> registered resource declarations
  resources/read   -> dispatch, rendered as resource contents
  prompts/list     -> registered prompt declarations
  prompts/get      -> dispatch, rendered as prompt messages
"""

from typing import Any, Dict, Optional

from greeting_mcp.config import Config
from greeting_mcp.server.dispatcher import Dispatcher, InvocationRequest
from greeting_mcp.server.encoder import Envelope
from greeting_mcp.server.errors import EXECUTION_FAILED
from greeting_mcp.server.logger import get_logger
from greeting_mcp.server.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ProtocolError,
    initialize_result,
    prompts_list_result,
    resources_list_result,
    tools_list_result,
)
from greeting_mcp.server.registry import CapabilityKind

log = get_logger("router")


class Router:
    """MCP method dispatcher."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher
        self._registry = dispatcher.registry
        self._initialized = False

    async def route(self, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Route a validated message to the appropriate handler.
        Returns the result payload or None for notifications.
        """
        method = msg.get("method", "")
        params = msg.get("params") or {}
        request_id = msg.get("id")

        if not isinstance(params, dict):
            raise ProtocolError(INVALID_PARAMS, "params must be an object")

        if method == "initialize":
            return self._handle_initialize(params)

        if method in ("initialized", "notifications/initialized"):
            self._initialized = True
            return None

        if method == "notifications/cancelled":
            # In-flight calls always run to completion
            return None

        if method == "ping":
            return {}

        if method == "tools/list":
            return tools_list_result(self._declarations(CapabilityKind.TOOL))

        if method == "tools/call":
            return await self._handle_tools_call(request_id, params)

        if method == "resources/list":
            return resources_list_result(self._declarations(CapabilityKind.RESOURCE))

        if method == "resources/read":
            return await self._handle_resources_read(request_id, params)

        if method == "prompts/list":
            return prompts_list_result(self._declarations(CapabilityKind.PROMPT))

        if method == "prompts/get":
            return await self._handle_prompts_get(request_id, params)

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        log.info(
            f"Client initialize: {params.get('clientInfo', {}).get('name', '?')} "
            f"protocol={params.get('protocolVersion', '?')}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=Config.PROTOCOL_VERSION,
        )

    def _declarations(self, kind: CapabilityKind):
        return [d.declaration() for d in self._registry.list(kind)]

    async def _handle_tools_call(self, request_id, params: Dict) -> Dict[str, Any]:
        name = params.get("name", "")
        if not name:
            raise ProtocolError(INVALID_PARAMS, "Missing tool name")

        envelope = await self._dispatcher.dispatch(InvocationRequest(
            request_id, CapabilityKind.TOOL, name, _arguments(params),
        ))
        return envelope.to_tool_result()

    async def _handle_resources_read(self, request_id, params: Dict) -> Dict[str, Any]:
        uri = params.get("uri", "")
        if not uri:
            raise ProtocolError(INVALID_PARAMS, "Missing resource URI")

        envelope = await self._dispatcher.dispatch(InvocationRequest(
            request_id, CapabilityKind.RESOURCE, uri,
        ))
        _raise_for_error(envelope)

        descriptor = self._registry.resolve(CapabilityKind.RESOURCE, uri)
        return envelope.to_resource_result(uri, descriptor.metadata.get("mimeType", "text/plain"))

    async def _handle_prompts_get(self, request_id, params: Dict) -> Dict[str, Any]:
        name = params.get("name", "")
        if not name:
            raise ProtocolError(INVALID_PARAMS, "Missing prompt name")

        envelope = await self._dispatcher.dispatch(InvocationRequest(
            request_id, CapabilityKind.PROMPT, name, _arguments(params),
        ))
        _raise_for_error(envelope)

        descriptor = self._registry.resolve(CapabilityKind.PROMPT, name)
        return envelope.to_prompt_result(descriptor.description)


def _arguments(params: Dict) -> Dict[str, Any]:
    args = params.get("arguments") or {}
    if not isinstance(args, dict):
        raise ProtocolError(INVALID_PARAMS, "arguments must be an object")
    return args


def _raise_for_error(envelope: Envelope):
    """Prompt and resource results have no isError slot; fail the request instead."""
    if not envelope.is_error:
        return
    code = INTERNAL_ERROR if envelope.error_kind == EXECUTION_FAILED else INVALID_PARAMS
    raise ProtocolError(code, envelope.text, data={
        "kind": envelope.error_kind,
        "content": envelope.content(),
    })
