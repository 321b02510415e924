"""Conformance checks for data values against already-validated schemas."""

import logging
from collections.abc import Mapping
from typing import Any

from json_schema_check.exceptions import UnvalidatedSchemaError
from json_schema_check.models import (
    MAX_DEPTH,
    SchemaType,
    get_value_kind_or_none,
    is_number,
)
from json_schema_check.schemas import ValidationResult, as_document

logger = logging.getLogger(__name__)


def _describe(value: Any) -> str:
    kind = get_value_kind_or_none(value)
    return kind.value if kind is not None else type(value).__name__


def _get_schema_type(schema: Any) -> Any:
    if not isinstance(schema, Mapping) or not schema.get("type"):
        logger.debug(f"Schema node without a 'type' field: {schema!r}")
        raise UnvalidatedSchemaError(
            "validate_data called with an unvalidated schema: "
            "the 'type' field is missing (run validate_schema first)"
        )
    return schema["type"]


def _validate_object(
    value: Any, schema: Mapping[str, Any], depth: int
) -> ValidationResult:
    properties = schema.get("properties")
    if not isinstance(properties, Mapping):
        raise UnvalidatedSchemaError(
            "validate_data called with an unvalidated object schema: "
            "'properties' is missing (run validate_schema first)"
        )
    if not isinstance(value, Mapping):
        return ValidationResult.fail("Not an object")

    required = set(schema.get("required") or [])
    for key, item in value.items():
        if key not in properties:
            return ValidationResult.fail(f"Unexpected key {key}")
        property_schema = as_document(properties[key])
        result = validate_data(item, property_schema, depth + 1)
        if not result:
            return result.wrap(f"Ill-formatted type at key '{key}'")

        # Redundant with the recursive check for known types; catches pass-through ones.
        expected = _get_schema_type(property_schema)
        if get_value_kind_or_none(item) != expected:
            return ValidationResult.fail(
                f"Invalid type '{_describe(item)}' for key {key} (expected {expected})"
            )
        required.discard(key)

    if required:
        return ValidationResult.fail(
            f"Some required fields were not provided: {', '.join(sorted(required))}"
        )
    return ValidationResult.ok()


def _validate_array(value: Any, schema: Mapping[str, Any]) -> ValidationResult:
    items = schema.get("items")
    if items is None:
        raise UnvalidatedSchemaError(
            "validate_data called with an unvalidated array schema: "
            "'items' is missing (run validate_schema first)"
        )
    if not isinstance(value, (list, tuple)):
        return ValidationResult.fail("Not an array")

    min_items = schema.get("minItems")
    if min_items is not None and len(value) < min_items:
        return ValidationResult.fail(
            f"Array length is smaller than 'minItems' ({len(value)} < {min_items})"
        )
    max_items = schema.get("maxItems")
    if max_items is not None and len(value) > max_items:
        return ValidationResult.fail(
            f"Array length is greater than 'maxItems' ({len(value)} > {max_items})"
        )

    # Each element is an independent value, so depth restarts at the item schema.
    for index, item in enumerate(value):
        result = validate_data(item, items, 0)
        if not result:
            return result.wrap(f"Invalid item at index {index}")
    return ValidationResult.ok()


def _validate_string(value: Any, schema: Mapping[str, Any]) -> ValidationResult:
    if not isinstance(value, str):
        return ValidationResult.fail(
            f"Invalid type: expected string, got {_describe(value)}"
        )
    min_length = schema.get("minLength")
    if min_length is not None and len(value) < min_length:
        return ValidationResult.fail(
            f"Got string shorter than minLength ({len(value)} < {min_length})"
        )
    max_length = schema.get("maxLength")
    if max_length is not None and len(value) > max_length:
        return ValidationResult.fail(
            f"Got string longer than maxLength ({len(value)} > {max_length})"
        )
    return ValidationResult.ok()


def validate_data(value: Any, schema: Any, depth: int = 0) -> ValidationResult:
    """
    Check a JSON-like value against a schema that already passed validate_schema.

    Args:
        value: Decoded JSON value to check.
        schema: Untyped schema document or a typed SchemaNode.
        depth: Nesting depth of this value; callers leave the default.

    Returns:
        ValidationResult: Valid, or invalid with the first violation found.

    Raises:
        UnvalidatedSchemaError: If the schema is missing structure that
            validate_schema guarantees (e.g. an array schema without `items`).
    """
    if depth > MAX_DEPTH:
        logger.debug(f"Data nesting exceeded depth {MAX_DEPTH}")
        return ValidationResult.fail(f"Maximum object depth ({MAX_DEPTH}) exceeded")

    schema = as_document(schema)
    schema_type = _get_schema_type(schema)

    if schema_type == SchemaType.OBJECT:
        result = _validate_object(value, schema, depth)
        if not result:
            return result.wrap("Invalid object")
    elif schema_type == SchemaType.ARRAY:
        result = _validate_array(value, schema)
        if not result:
            return result.wrap("Invalid array")
    elif schema_type == SchemaType.STRING:
        return _validate_string(value, schema)
    elif schema_type == SchemaType.NUMBER:
        if not is_number(value):
            return ValidationResult.fail(
                f"Invalid type: expected number, got {_describe(value)}"
            )
    elif schema_type == SchemaType.BOOLEAN:
        if not isinstance(value, bool):
            return ValidationResult.fail(
                f"Invalid type: expected boolean, got {_describe(value)}"
            )
    else:
        logger.warning(
            f"Unknown schema type '{schema_type}', accepting value without checks"
        )
    return ValidationResult.ok()
