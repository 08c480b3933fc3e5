"""
Capability Host — Main Orchestrator

Ties together:
  Transport -> Protocol -> Router -> Dispatcher -> Registry

Flow:
  1. Transport reads one line from stdin
  2. Protocol validates JSON-RPC 2.0
  3. Each request is handled in its own task so a slow tool (image
     generation) never holds up the ones behind it
  4. Router dispatches to the capability handler
  5. Transport writes the response, tagged with the request id, as soon
     as it is ready; responses may leave out of arrival order
"""

import asyncio
import signal
from typing import Any, Dict, List, Optional, Set

from greeting_mcp.config import Config
from greeting_mcp.server.dispatcher import Dispatcher
from greeting_mcp.server.logger import get_logger
from greeting_mcp.server.protocol import (
    INTERNAL_ERROR,
    ProtocolError,
    make_error,
    make_response,
    validate_message,
)
from greeting_mcp.server.registry import CapabilityKind, CapabilityRegistry
from greeting_mcp.server.router import Router
from greeting_mcp.server.transport import StdioTransport

log = get_logger("server")


class CapabilityHost:
    """
    Main server orchestrator.

    Usage:
        registry = CapabilityRegistry()
        register_all(registry)
        await CapabilityHost(registry).run()
    """

    def __init__(self, registry: CapabilityRegistry, transport: Optional[StdioTransport] = None):
        Config.ensure_dirs()

        self._registry = registry
        self._transport = transport or StdioTransport()
        self._router = Router(Dispatcher(registry))
        self._tasks: Set[asyncio.Task] = set()
        self._signals: List[int] = []
        self._running = False
        self._main_task: Optional[asyncio.Task] = None

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    # -- main loop --

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")

        self._registry.seal()
        await self._transport.start()

        loop = asyncio.get_event_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, lambda: asyncio.ensure_future(self.shutdown()))
                self._signals.append(sig)
            except (NotImplementedError, RuntimeError, ValueError):
                pass

        self._running = True
        self._main_task = asyncio.current_task()
        log.info(
            f"Server ready — tools={self._registry.count(CapabilityKind.TOOL)} "
            f"resources={self._registry.count(CapabilityKind.RESOURCE)} "
            f"prompts={self._registry.count(CapabilityKind.PROMPT)}"
        )

        try:
            while self._running:
                try:
                    msg = await self._transport.read_message()
                except ProtocolError as exc:
                    await self._transport.write_message(make_error(None, exc.code, exc.message))
                    continue

                if msg is None:
                    log.info("EOF on stdin — shutting down")
                    break

                self._spawn(msg)

            if self._tasks:
                log.info(f"Waiting for {len(self._tasks)} in-flight requests")
                await asyncio.gather(*list(self._tasks), return_exceptions=True)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            await self.shutdown()

    def _spawn(self, msg: Dict[str, Any]) -> asyncio.Task:
        task = asyncio.ensure_future(self._handle_message(msg))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _handle_message(self, msg: Dict[str, Any]):
        """Process a single JSON-RPC message through the full pipeline."""
        request_id = msg.get("id") if isinstance(msg, dict) else None

        try:
            msg_type = validate_message(msg)
            if msg_type in ("response", "error"):
                # Client answers to server requests; this host sends none
                return

            result = await self._router.route(msg)
            if result is None or msg_type == "notification":
                return

            await self._transport.write_message(make_response(request_id, result))

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            # Non-object messages carry no id; JSON-RPC answers them with id null
            if request_id is not None or not isinstance(msg, dict):
                await self._transport.write_message(make_error(request_id, exc.code, exc.message, exc.data))

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is not None:
                await self._transport.write_message(make_error(request_id, INTERNAL_ERROR, str(exc)))

    async def shutdown(self):
        """Graceful shutdown — cancel in-flight requests, close transport."""
        if not self._running:
            return
        self._running = False

        pending = [t for t in self._tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        # Signal path: the read loop is still parked on stdin
        if self._main_task is not None and self._main_task is not asyncio.current_task():
            self._main_task.cancel()

        loop = asyncio.get_event_loop()
        for sig in self._signals:
            loop.remove_signal_handler(sig)
        self._signals.clear()

        await self._transport.close()
        log.info("Server stopped")
