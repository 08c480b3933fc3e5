"""
Greeting MCP Configuration — Unified settings for the capability host

Load order: env vars > ~/.greeting-mcp/config.env > defaults
"""

import os
from pathlib import Path


def _load_config_env(config_file: Path):
    """Load key=value pairs from a config.env file if it exists."""
    if not config_file.exists():
        return
    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


_DEFAULT_DIR = Path(os.environ.get("GREETING_MCP_DATA_DIR", str(Path.home() / ".greeting-mcp")))

# Load config.env before reading env vars
_load_config_env(_DEFAULT_DIR / "config.env")


class Config:
    # Server identity
    SERVER_NAME = "greeting-mcp"
    SERVER_VERSION = "1.0.0"
    PROTOCOL_VERSION = "2024-11-05"

    # Paths
    DATA_DIR = _DEFAULT_DIR
    LOG_DIR = DATA_DIR / "logs"

    # Logging (NEVER to stdout — would corrupt MCP protocol)
    LOG_LEVEL = os.environ.get("GREETING_MCP_LOG_LEVEL", "INFO")
    LOG_FILE = LOG_DIR / "greeting-mcp.log"
    ERROR_LOG = LOG_DIR / "greeting-mcp-errors.log"

    # Image generation (Hugging Face inference router)
    HF_TOKEN = os.environ.get("HF_TOKEN") or None
    IMAGE_MODEL = "black-forest-labs/FLUX.1-schnell"
    IMAGE_STEPS = 5
    IMAGE_TIMEOUT = float(os.environ.get("GREETING_MCP_IMAGE_TIMEOUT", "120"))

    @classmethod
    def ensure_dirs(cls):
        """Create required directories."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
