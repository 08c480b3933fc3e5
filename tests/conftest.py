"""Shared fixtures for Greeting MCP tests."""

import asyncio
import os

import pytest

from greeting_mcp.server.errors import PreconditionError
from greeting_mcp.server.registry import CapabilityRegistry
from greeting_mcp.server.dispatcher import Dispatcher


@pytest.fixture
def tmp_data_dir(tmp_path):
    """Point Config at a temp directory for isolated tests."""
    data_dir = tmp_path / ".greeting-mcp"
    data_dir.mkdir()
    (data_dir / "logs").mkdir()
    os.environ["GREETING_MCP_DATA_DIR"] = str(data_dir)

    from greeting_mcp import config
    original = (config.Config.DATA_DIR, config.Config.LOG_DIR)
    config.Config.DATA_DIR = data_dir
    config.Config.LOG_DIR = data_dir / "logs"

    yield data_dir

    config.Config.DATA_DIR, config.Config.LOG_DIR = original
    os.environ.pop("GREETING_MCP_DATA_DIR", None)


class FakeImageGenerator:
    """Stands in for ImageGenerator; counts calls to generate()."""

    def __init__(self, configured=True, data=b"\x89PNG\r\n\x1a\nfake", error=None, delay=0.0):
        self.configured = configured
        self.data = data
        self.error = error
        self.delay = delay
        self.calls = []

    async def generate(self, prompt):
        self.calls.append(prompt)
        if not self.configured:
            raise PreconditionError("HF_TOKEN is not set")
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def fake_generator():
    return FakeImageGenerator()


@pytest.fixture
def registry(fake_generator):
    from greeting_mcp.tools import register_all
    return register_all(CapabilityRegistry(), fake_generator)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)
