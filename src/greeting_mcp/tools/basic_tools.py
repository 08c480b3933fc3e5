"""
Basic Tools — synchronous, side-effect-free capabilities

Tools:
  greeting    — Greet someone in Korean, English or Japanese
  calculator  — Four-function arithmetic
  korea-time  — Current time in Korea (KST, UTC+9)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from greeting_mcp.server.registry import CapabilityRegistry
from greeting_mcp.server.schema import ENUM, NUMBER, STRING, Param, ParameterSchema

KST = timezone(timedelta(hours=9), "KST")

LANGUAGES = ("korean", "english", "japanese")
OPERATIONS = ("add", "subtract", "multiply", "divide")
TIME_FORMATS = ("full", "simple", "date-only", "time-only")

DIVIDE_BY_ZERO = "❌ Error: cannot divide by zero!"

GREETING_SCHEMA = ParameterSchema.of(
    Param("name", STRING, "Name of the person to greet"),
    Param("language", ENUM, "Greeting language (default: korean)",
          required=False, default="korean", choices=LANGUAGES),
)

CALCULATOR_SCHEMA = ParameterSchema.of(
    Param("operation", ENUM,
          "Operation (add: addition, subtract: subtraction, multiply: multiplication, divide: division)",
          choices=OPERATIONS),
    Param("a", NUMBER, "First number"),
    Param("b", NUMBER, "Second number"),
)

KOREA_TIME_SCHEMA = ParameterSchema.of(
    Param("format", ENUM, "Output format (default: full)",
          required=False, default="full", choices=TIME_FORMATS),
)

_GREETINGS = {
    "korean": "안녕하세요, {name}님! 만나서 반갑습니다!",
    "english": "Hello, {name}! Nice to meet you!",
    "japanese": "こんにちは、{name}さん！はじめまして！",
}

# operation -> (symbol, label)
_OPERATIONS = {
    "add": ("+", "Addition"),
    "subtract": ("-", "Subtraction"),
    "multiply": ("×", "Multiplication"),
    "divide": ("÷", "Division"),
}

_WEEKDAYS = ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"]


def register(registry: CapabilityRegistry):
    registry.tool(
        "greeting",
        "Greets the user by name in Korean, English or Japanese.",
        GREETING_SCHEMA,
    )(greeting)
    registry.tool(
        "calculator",
        "Calculator performing addition, subtraction, multiplication and division.",
        CALCULATOR_SCHEMA,
    )(calculator)
    registry.tool(
        "korea-time",
        "Returns the current time in Korea (KST).",
        KOREA_TIME_SCHEMA,
    )(korea_time)


async def greeting(args: Dict[str, Any]) -> str:
    language = args.get("language", "korean")
    return _GREETINGS[language].format(name=args["name"])


async def calculator(args: Dict[str, Any]) -> str:
    operation, a, b = args["operation"], args["a"], args["b"]
    symbol, label = _OPERATIONS[operation]

    if operation == "add":
        result = a + b
    elif operation == "subtract":
        result = a - b
    elif operation == "multiply":
        result = a * b
    else:
        if b == 0:
            return DIVIDE_BY_ZERO
        result = a / b

    formatted = format_number(result, places=2)
    return (
        "🧮 **Result**\n\n"
        f"**Operation**: {label} ({symbol})\n"
        f"**Expression**: {format_number(a)} {symbol} {format_number(b)} = {formatted}\n"
        f"**Result**: **{formatted}**"
    )


def format_number(value, places=None) -> str:
    """Integral values without decimals; others fixed to `places` when given."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if places is None:
        return repr(value)
    return f"{value:.{places}f}"


def _now() -> datetime:
    return datetime.now(KST)


async def korea_time(args: Dict[str, Any]) -> str:
    fmt = args.get("format", "full")
    now = _now().astimezone(KST)

    hour12 = now.hour % 12 or 12
    ampm = "오후" if now.hour >= 12 else "오전"
    weekday = _WEEKDAYS[now.weekday()]

    if fmt == "simple":
        return f"{now.month}/{now.day} {now.hour:02d}:{now.minute:02d}"
    if fmt == "date-only":
        return f"{now.year}년 {now.month}월 {now.day}일 {weekday}"
    if fmt == "time-only":
        return f"{ampm} {hour12}:{now.minute:02d}:{now.second:02d}"
    return (
        f"{now.year}년 {now.month}월 {now.day}일 {weekday} "
        f"{ampm} {hour12}:{now.minute:02d}:{now.second:02d}"
    )
