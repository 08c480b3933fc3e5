"""Tests for the built-in tool, prompt and resource handlers."""

from datetime import datetime

import pytest

from greeting_mcp.tools import basic_tools
from greeting_mcp.tools.basic_tools import KST, calculator, format_number, greeting, korea_time
from greeting_mcp.tools.prompts import code_review, detect_language
from greeting_mcp.tools.resources import SERVER_SPEC_URI, server_spec


class TestGreeting:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("language,expected", [
        ("korean", "안녕하세요, Kim님! 만나서 반갑습니다!"),
        ("english", "Hello, Kim! Nice to meet you!"),
        ("japanese", "こんにちは、Kimさん！はじめまして！"),
    ])
    async def test_languages(self, language, expected):
        assert await greeting({"name": "Kim", "language": language}) == expected

    @pytest.mark.asyncio
    async def test_default_korean(self):
        assert (await greeting({"name": "Kim"})).startswith("안녕하세요")


class TestCalculator:
    @pytest.mark.asyncio
    async def test_expression_line(self):
        text = await calculator({"operation": "divide", "a": 1, "b": 3})
        assert "**Expression**: 1 ÷ 3 = 0.33" in text
        assert "**Result**: **0.33**" in text

    @pytest.mark.asyncio
    async def test_integral_float_result(self):
        text = await calculator({"operation": "add", "a": 2.5, "b": 2.5})
        assert "2.5 + 2.5 = 5\n" in text

    @pytest.mark.asyncio
    async def test_divide_by_zero(self):
        assert await calculator({"operation": "divide", "a": 5, "b": 0}) == basic_tools.DIVIDE_BY_ZERO

    def test_format_number(self):
        assert format_number(4) == "4"
        assert format_number(4.0) == "4"
        assert format_number(2.5) == "2.5"
        assert format_number(2.5, places=2) == "2.50"


class TestKoreaTime:
    @pytest.fixture
    def afternoon(self, monkeypatch):
        monkeypatch.setattr(basic_tools, "_now", lambda: datetime(2025, 6, 2, 14, 3, 40, tzinfo=KST))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fmt,expected", [
        ("full", "2025년 6월 2일 월요일 오후 2:03:40"),
        ("simple", "6/2 14:03"),
        ("date-only", "2025년 6월 2일 월요일"),
        ("time-only", "오후 2:03:40"),
    ])
    async def test_formats(self, afternoon, fmt, expected):
        assert await korea_time({"format": fmt}) == expected

    @pytest.mark.asyncio
    async def test_midnight_is_twelve_am(self, monkeypatch):
        monkeypatch.setattr(basic_tools, "_now", lambda: datetime(2025, 6, 1, 0, 5, 0, tzinfo=KST))
        assert await korea_time({"format": "time-only"}) == "오전 12:05:00"


class TestCodeReview:
    @pytest.mark.parametrize("code,language", [
        ("const x: number = 1 as number", "TypeScript"),
        ("const x = 1;", "JavaScript"),
        ("def main():\n    pass", "Python"),
        ("<?php echo 1;", "PHP"),
        ("echo phpversion();", "PHP"),
        ("public class Main {}", "Java"),
        ("#include <iostream>", "C++"),
        ("fn main() {}", "Rust"),
        ("package main", "Go"),
        ("SELECT 1", "Unknown"),
    ])
    def test_detect_language(self, code, language):
        assert detect_language(code) == language

    @pytest.mark.asyncio
    async def test_single_user_message(self):
        messages = await code_review({"code": "def f():\n    return 1"})
        assert len(messages) == 1
        assert messages[0].role == "user"
        assert "Language: Python" in messages[0].text
        assert "```python\ndef f():\n    return 1\n```" in messages[0].text


class TestServerSpec:
    @pytest.mark.asyncio
    async def test_document(self):
        text = await server_spec({})
        assert text.startswith("# 🚀 Greeting MCP Server")
        assert "generate-image" in text
        assert "HF_TOKEN" in text

    def test_uri(self):
        assert SERVER_SPEC_URI == "server-spec://info"
