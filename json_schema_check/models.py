from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

MAX_DEPTH = 20


class SchemaType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class ValueKind(StrEnum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


ALLOWED_KEYS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        SchemaType.STRING.value: frozenset(
            {"type", "default", "minLength", "maxLength"}
        ),
        SchemaType.BOOLEAN.value: frozenset({"type", "default"}),
        SchemaType.NUMBER.value: frozenset({"type", "default"}),
    }
)


def get_value_kind(value: Any) -> ValueKind:
    """
    Classify a decoded JSON value.

    Args:
        value: The value to classify.

    Returns:
        ValueKind enum value.

    Raises:
        TypeError: If the value cannot come out of a JSON decoder.
    """
    # bool is a subclass of int, so it has to be checked first
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def get_value_kind_or_none(value: Any) -> ValueKind | None:
    """Classify a value, returning None for non-JSON values."""
    try:
        return get_value_kind(value)
    except TypeError:
        return None


def is_number(value: Any) -> bool:
    """Check whether a value is a JSON number (bool excluded)."""
    return get_value_kind_or_none(value) == ValueKind.NUMBER
