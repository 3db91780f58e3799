"""Classification of structured (JSON-shaped) tool values."""

from __future__ import annotations

import json
from enum import Enum, auto
from typing import Any

Value = str | int | float | bool | None | dict[str, Any] | list[Any]


class ValueKind(Enum):
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    OBJECT = auto()
    ARRAY = auto()


SCALAR_KINDS = frozenset({ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN, ValueKind.NULL})


def value_kind(value: Any) -> ValueKind:
    """Tag a value with its kind.

    Only JSON-shaped data reaches the printer, so anything else is a bug in the
    caller and fails loudly.
    """
    match value:
        case bool():
            return ValueKind.BOOLEAN
        case str():
            return ValueKind.STRING
        case int() | float():
            return ValueKind.NUMBER
        case None:
            return ValueKind.NULL
        case dict():
            return ValueKind.OBJECT
        case list() | tuple():
            return ValueKind.ARRAY
        case _:
            raise AssertionError(f"unsupported value type: {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    """True for strings, numbers, booleans and null."""
    return value_kind(value) in SCALAR_KINDS


def scalar_text(value: Any) -> str:
    """Canonical text of a scalar: strings as-is, true/false, null, numbers."""
    match value_kind(value):
        case ValueKind.STRING:
            return value
        case ValueKind.BOOLEAN:
            return "true" if value else "false"
        case ValueKind.NULL:
            return "null"
        case ValueKind.NUMBER:
            return json.dumps(value)
        case kind:
            raise AssertionError(f"not a scalar: {kind.name}")


def json_text(value: Any) -> str:
    """Compact JSON form, used for array elements printed on their own line."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
