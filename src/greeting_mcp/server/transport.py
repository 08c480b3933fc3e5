"""
STDIO Transport — newline-delimited JSON-RPC over stdin/stdout

Reads from stdin, writes to stdout.
NEVER pollutes stdout with logs.
"""

import asyncio
import json
import sys
from typing import Any, Dict, Optional

from greeting_mcp.server.logger import get_logger
from greeting_mcp.server.protocol import INVALID_REQUEST, PARSE_ERROR, ProtocolError

log = get_logger("transport")

MAX_LINE_BYTES = 2**22


class StdioTransport:
    """Line-framed STDIO transport."""

    def __init__(
        self,
        reader: Optional[asyncio.StreamReader] = None,
        writer=None,
        limit: int = MAX_LINE_BYTES,
    ):
        self.running = False
        self._reader = reader
        self._stdout = writer
        self._limit = limit

    async def start(self):
        """Initialize async stdin reader and direct stdout writer."""
        if self._reader is None:
            loop = asyncio.get_event_loop()
            self._reader = asyncio.StreamReader(limit=self._limit)
            protocol = asyncio.StreamReaderProtocol(self._reader)
            await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        if self._stdout is None:
            self._stdout = sys.stdout.buffer
        self.running = True
        log.info("Transport initialized")

    async def read_message(self) -> Optional[Dict[str, Any]]:
        """
        Read one JSON-RPC message from stdin.
        Returns the parsed message, None on EOF, or raises ProtocolError
        for a line that is too long or not valid JSON.
        """
        if not self._reader:
            raise RuntimeError("Transport not started")

        while True:
            try:
                raw_bytes = await self._reader.readline()
            except (ValueError, asyncio.LimitOverrunError) as exc:
                # StreamReader has already dropped the oversized chunk
                log.error(f"Oversized message: {exc}")
                raise ProtocolError(INVALID_REQUEST, f"Message exceeds {self._limit} bytes") from exc
            if not raw_bytes:
                return None
            if raw_bytes.strip():
                break

        try:
            return json.loads(raw_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log.error(f"JSON parse error: {exc}")
            raise ProtocolError(PARSE_ERROR, f"Parse error: {exc}") from exc

    async def write_message(self, message: Dict[str, Any]):
        """Write a JSON-RPC message to stdout."""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_bytes = (json.dumps(message, ensure_ascii=False, separators=(",", ":")) + "\n").encode("utf-8")

        # write + flush with no await in between keeps concurrent responses whole
        self._stdout.write(raw_bytes)
        self._stdout.flush()

    async def close(self):
        self.running = False
        log.info("Transport closed")
