"""
Resources

  server-spec://info  — Markdown overview of the server and its capabilities
"""

from typing import Any, Dict

from greeting_mcp.config import Config
from greeting_mcp.server.registry import CapabilityRegistry

SERVER_SPEC_URI = "server-spec://info"

SERVER_SPEC = f"""# 🚀 Greeting MCP Server

## 📋 Server Info
- **Name**: {Config.SERVER_NAME}
- **Version**: {Config.SERVER_VERSION}
- **Language**: Python
- **Protocol**: Model Context Protocol (MCP) {Config.PROTOCOL_VERSION}

## 🛠️ Tools

### 1. 🤝 Greeting (`greeting`)
> Greets someone in Korean, English or Japanese

**Parameters:**
- `name` (required): who to greet
- `language` (optional): `korean` (default), `english`, `japanese`

**Example:**
```
greeting(name: "Kim", language: "english")
→ "Hello, Kim! Nice to meet you!"
```

### 2. 🧮 Calculator (`calculator`)
> Four-function arithmetic

**Parameters:**
- `operation` (required): `add`, `subtract`, `multiply`, `divide`
- `a` (required): first number
- `b` (required): second number

**Example:**
```
calculator(operation: "multiply", a: 39800, b: 10)
→ 🧮 Result: 398000
```

### 3. ⏰ Korea Time (`korea-time`)
> Current Korea Standard Time (KST)

**Parameters:**
- `format` (optional): `full` (default), `simple`, `date-only`, `time-only`

### 4. 🎨 Image Generation (`generate-image`)
> Generates an image from a text prompt

**Parameters:**
- `prompt` (required): text prompt

**Details:**
- **Model**: {Config.IMAGE_MODEL}
- **Output**: base64-encoded PNG
- **Inference steps**: {Config.IMAGE_STEPS}

**Requires:** a Hugging Face API token in `HF_TOKEN`

## 📝 Prompts

### 1. 📋 Code Review (`code-review`)
> Structured review request for a code snippet

**Parameters:**
- `code` (required): code to review

**Detected languages:** TypeScript, JavaScript, Python, Java, C++, Rust, Go, PHP

## 📦 Running
```bash
pip install -e .
greeting-mcp server
```
"""


async def server_spec(args: Dict[str, Any]) -> str:
    return SERVER_SPEC


def register(registry: CapabilityRegistry):
    registry.resource(
        SERVER_SPEC_URI,
        "server-spec",
        "Markdown document describing the server and its tools.",
        mime_type="text/markdown",
    )(server_spec)
