"""
Prompts

  code-review  — Structured review request for a pasted code snippet
"""

import re
from typing import Any, Dict, List

from greeting_mcp.server.encoder import PromptMessage
from greeting_mcp.server.registry import CapabilityRegistry
from greeting_mcp.server.schema import STRING, Param, ParameterSchema

UNKNOWN_LANGUAGE = "Unknown"

CODE_REVIEW_SCHEMA = ParameterSchema.of(
    Param("code", STRING, "Code to review"),
)

# Checked in order; first match wins
_LANGUAGE_PATTERNS = [
    ("Python", re.compile(r"def\s+.*:|import\s+.*:|class\s+.*:|if\s+__name__")),
    ("PHP", re.compile(r"function\s+.*\(.*\)\s*{|<?php")),
    ("Java", re.compile(r"public\s+class|import\s+java|System\.out\.println")),
    ("C++", re.compile(r"#include|int\s+main|cout\s*<<")),
    ("Rust", re.compile(r"fn\s+.*\(|use\s+std::|let\s+mut")),
    ("Go", re.compile(r"func\s+.*\(|package\s+main|fmt\.Print")),
]

_JS_LIKE = re.compile(r"import\s+.*from|export\s+.*|const\s+.*=|let\s+.*=|function\s+.*\(")
_TS_ONLY = re.compile(r"interface\s+|type\s+.*=|as\s+")

_REVIEW_TEMPLATE = """You are an experienced senior developer. Analyze and review the following code thoroughly.

**Code under review:**
Language: {language}

```{fence}
{code}
```

**Checkpoints:**
- Readability and clarity
- Logical correctness and potential bugs
- Error handling
- Performance and efficiency
- Security issues
- Coding style and best practices
- Test coverage
- Documentation quality

Give structured, constructive feedback in this format:

### ✅ Strengths
- [What is done well, specifically]

### ⚠️ Areas for Improvement
- [Problems and concrete fixes]

### 🚨 Critical Issues
- [Security, performance or correctness problems, by priority]

### 💡 Suggestions
- [Better approaches or alternatives]

### 📊 Overall Assessment
- **Score**: /10
- **Key improvements**: [1-3 items]
- **Recommended actions**: [What to fix right away]

Keep the tone professional but friendly."""


def detect_language(code: str) -> str:
    if _JS_LIKE.search(code):
        return "TypeScript" if _TS_ONLY.search(code) else "JavaScript"
    for language, pattern in _LANGUAGE_PATTERNS:
        if pattern.search(code):
            return language
    return UNKNOWN_LANGUAGE


async def code_review(args: Dict[str, Any]) -> List[PromptMessage]:
    code = args["code"]
    language = detect_language(code)
    fence = "" if language == UNKNOWN_LANGUAGE else language.lower()
    text = _REVIEW_TEMPLATE.format(language=language, fence=fence, code=code)
    return [PromptMessage("user", text)]


def register(registry: CapabilityRegistry):
    registry.prompt(
        "code-review",
        "Prompt for a systematic review of user-supplied code.",
        CODE_REVIEW_SCHEMA,
    )(code_review)
