"""Tests for parameter schemas and the validator."""

import pytest

from greeting_mcp.server.errors import (
    InvalidEnumValueError,
    MissingParameterError,
    TypeMismatchError,
    ValidationError,
)
from greeting_mcp.server.schema import (
    ENUM,
    NUMBER,
    STRING,
    Param,
    ParameterSchema,
    validate,
)

SCHEMA = ParameterSchema.of(
    Param("name", STRING, "Who"),
    Param("count", NUMBER, "How many", required=False),
    Param("mode", ENUM, "Mode", required=False, default="fast", choices=("fast", "slow")),
)


class TestValidate:
    def test_valid_with_defaults(self):
        assert validate(SCHEMA, {"name": "Kim"}) == {"name": "Kim", "mode": "fast"}

    def test_optional_without_default_left_absent(self):
        assert "count" not in validate(SCHEMA, {"name": "Kim"})

    def test_missing_required(self):
        with pytest.raises(MissingParameterError) as exc_info:
            validate(SCHEMA, {"mode": "slow"})
        assert exc_info.value.parameter == "name"
        assert "name" in exc_info.value.message

    def test_none_counts_as_missing(self):
        with pytest.raises(MissingParameterError):
            validate(SCHEMA, {"name": None})

    def test_empty_args(self):
        with pytest.raises(MissingParameterError):
            validate(SCHEMA, None)

    def test_string_type_mismatch(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            validate(SCHEMA, {"name": 42})
        assert exc_info.value.parameter == "name"
        assert exc_info.value.expected == "string"

    @pytest.mark.parametrize("raw,expected", [(3, 3), (2.5, 2.5), ("7", 7), (" 1.5 ", 1.5), (-4, -4)])
    def test_number_coercion(self, raw, expected):
        assert validate(SCHEMA, {"name": "a", "count": raw})["count"] == expected

    @pytest.mark.parametrize("raw", [True, "abc", [1], {"n": 1}, "nan", float("inf")])
    def test_number_rejects(self, raw):
        with pytest.raises(TypeMismatchError) as exc_info:
            validate(SCHEMA, {"name": "a", "count": raw})
        assert "number" in exc_info.value.message

    def test_enum_rejects_non_member(self):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            validate(SCHEMA, {"name": "a", "mode": "warp"})
        assert exc_info.value.accepted == ("fast", "slow")
        assert "fast, slow" in exc_info.value.message

    def test_enum_rejects_non_string(self):
        with pytest.raises(InvalidEnumValueError):
            validate(SCHEMA, {"name": "a", "mode": 1})

    def test_all_or_nothing(self):
        raw = {"name": "a", "count": "x"}
        with pytest.raises(ValidationError):
            validate(SCHEMA, raw)
        assert raw == {"name": "a", "count": "x"}

    def test_extra_args_dropped(self):
        assert validate(SCHEMA, {"name": "a", "junk": 1}) == {"name": "a", "mode": "fast"}


class TestSchemaRendering:
    def test_json_schema(self):
        schema = SCHEMA.to_json_schema()
        assert schema["type"] == "object"
        assert schema["required"] == ["name"]
        assert schema["properties"]["count"]["type"] == "number"
        assert schema["properties"]["mode"]["enum"] == ["fast", "slow"]
        assert schema["properties"]["mode"]["default"] == "fast"

    def test_json_schema_no_required(self):
        schema = ParameterSchema.of(Param("x", STRING, required=False)).to_json_schema()
        assert "required" not in schema

    def test_prompt_arguments(self):
        args = SCHEMA.to_prompt_arguments()
        assert args[0] == {"name": "name", "description": "Who", "required": True}
        assert args[1]["required"] is False

    def test_enum_needs_choices(self):
        with pytest.raises(ValueError):
            Param("x", ENUM)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            Param("x", "date")
