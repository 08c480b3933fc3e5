"""
Parameter schemas — declarative argument shapes and their validator

A ParameterSchema lists the named parameters a capability accepts. The
same schema is rendered as a JSON Schema for tools/list, as an argument
list for prompts/list, and interpreted by validate() on every call.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from greeting_mcp.server.errors import (
    InvalidEnumValueError,
    MissingParameterError,
    TypeMismatchError,
)

STRING = "string"
NUMBER = "number"
ENUM = "enum"

_TYPES = (STRING, NUMBER, ENUM)


@dataclass(frozen=True)
class Param:
    name: str
    type: str
    description: str = ""
    required: bool = True
    default: Any = None
    choices: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.type not in _TYPES:
            raise ValueError(f"Unsupported parameter type: {self.type}")
        if self.type == ENUM and not self.choices:
            raise ValueError(f"Enum parameter '{self.name}' needs choices")
        object.__setattr__(self, "choices", tuple(self.choices))


@dataclass(frozen=True)
class ParameterSchema:
    params: Tuple[Param, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def of(cls, *params: Param) -> "ParameterSchema":
        return cls(params)

    def to_json_schema(self) -> Dict[str, Any]:
        """Render as a JSON Schema object (tool inputSchema)."""
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for p in self.params:
            prop: Dict[str, Any] = {"type": NUMBER if p.type == NUMBER else STRING}
            if p.type == ENUM:
                prop["enum"] = list(p.choices)
            if p.description:
                prop["description"] = p.description
            if p.default is not None:
                prop["default"] = p.default
            properties[p.name] = prop
            if p.required:
                required.append(p.name)

        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def to_prompt_arguments(self) -> List[Dict[str, Any]]:
        return [
            {"name": p.name, "description": p.description, "required": p.required}
            for p in self.params
        ]


EMPTY_SCHEMA = ParameterSchema()


def validate(schema: ParameterSchema, raw_args: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Check raw arguments against a schema.

    Returns a new dict holding only declared parameters, with optional
    defaults filled in and numeric strings coerced. Raises the first
    ValidationError found; nothing is partially applied.
    """
    raw_args = raw_args or {}
    validated: Dict[str, Any] = {}

    for p in schema.params:
        value = raw_args.get(p.name)

        if value is None:
            if p.required:
                raise MissingParameterError(p.name)
            if p.default is not None:
                validated[p.name] = p.default
            continue

        validated[p.name] = _check(p, value)

    return validated


def _check(p: Param, value: Any) -> Any:
    if p.type == STRING:
        if not isinstance(value, str):
            raise TypeMismatchError(p.name, STRING, value)
        return value

    if p.type == NUMBER:
        number = _coerce_number(value)
        if number is None:
            raise TypeMismatchError(p.name, NUMBER, value)
        return number

    if not isinstance(value, str) or value not in p.choices:
        raise InvalidEnumValueError(p.name, value, p.choices)
    return value


def _coerce_number(value: Any):
    # bool is an int subclass, never a number argument
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
    else:
        return None

    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number
