"""Well-formedness checks for schema documents."""

import logging
from collections.abc import Mapping
from typing import Any

from json_schema_check.models import ALLOWED_KEYS, MAX_DEPTH, SchemaType, is_number
from json_schema_check.schemas import ValidationResult, as_document

logger = logging.getLogger(__name__)


def _validate_object(schema: Mapping[str, Any], depth: int) -> ValidationResult:
    properties = schema.get("properties")
    if not isinstance(properties, Mapping) or not properties:
        return ValidationResult.fail("At least one property must be set")

    required_names = schema.get("required")
    if required_names is None:
        required_names = []
    if not isinstance(required_names, (list, tuple)) or not all(
        isinstance(name, str) for name in required_names
    ):
        return ValidationResult.fail("'required' must be an array of property names")

    required = set(required_names)
    if len(required) > len(properties):
        return ValidationResult.fail(
            "Unsatisfiable requirement: more required fields than properties "
            f"({len(required)} > {len(properties)})"
        )

    for key, property_schema in properties.items():
        required.discard(key)
        if not isinstance(property_schema, Mapping) or not property_schema.get("type"):
            return ValidationResult.fail(f"The 'type' field is missing in key {key}")
        result = validate_schema(property_schema, depth + 1)
        if not result:
            return result.wrap(f"Ill-formatted type at key '{key}'")

    if required:
        return ValidationResult.fail(
            f"Some required fields were not provided: {', '.join(sorted(required))}"
        )
    return ValidationResult.ok()


def _validate_array(schema: Mapping[str, Any], depth: int) -> ValidationResult:
    items = schema.get("items")
    if items is None:
        return ValidationResult.fail("Expected 'items' field in array object schema")
    for bound in ("minItems", "maxItems"):
        if bound in schema and not is_number(schema[bound]):
            return ValidationResult.fail(
                f"Invalid type for {bound}: Expected a number"
            )
    return validate_schema(items, depth + 1)


def _validate_leaf(schema: Mapping[str, Any], schema_type: str) -> ValidationResult:
    allowed = ALLOWED_KEYS[schema_type]
    for key, value in schema.items():
        if key not in allowed:
            return ValidationResult.fail(
                f"Unexpected schema key '{key}' for {schema_type} instance, "
                f"expected one of {', '.join(sorted(allowed))}"
            )
        if (
            schema_type == SchemaType.STRING
            and key in ("minLength", "maxLength")
            and not is_number(value)
        ):
            return ValidationResult.fail(
                f"Invalid string: {key} must be a number (got {value!r})"
            )
    return ValidationResult.ok()


def validate_schema(schema: Any, depth: int = 0) -> ValidationResult:
    """
    Check that a schema document is well-formed.

    Object nodes need a non-empty `properties` map whose keys cover `required`,
    array nodes need `items`, and leaf nodes may only carry the keys listed in
    ALLOWED_KEYS. Nested nodes are checked recursively up to MAX_DEPTH.

    Args:
        schema: Untyped schema document (e.g. parsed JSON) or a typed SchemaNode.
        depth: Nesting depth of this node; callers leave the default.

    Returns:
        ValidationResult: Valid, or invalid with the first violation found.
    """
    if depth > MAX_DEPTH:
        logger.debug(f"Schema nesting exceeded depth {MAX_DEPTH}")
        return ValidationResult.fail(f"Maximum schema depth ({MAX_DEPTH}) exceeded")

    schema = as_document(schema)
    if not isinstance(schema, Mapping):
        return ValidationResult.fail(
            f"Schema node must be an object, got {type(schema).__name__}"
        )

    schema_type = schema.get("type")
    if not schema_type:
        return ValidationResult.fail("The 'type' field is missing in object")

    if schema_type == SchemaType.OBJECT:
        result = _validate_object(schema, depth)
        if not result:
            return result.wrap("Invalid object")
    elif schema_type == SchemaType.ARRAY:
        result = _validate_array(schema, depth)
        if not result:
            return result.wrap("Invalid array")
    elif isinstance(schema_type, str) and schema_type in ALLOWED_KEYS:
        result = _validate_leaf(schema, schema_type)
        if not result:
            return result
    else:
        return ValidationResult.fail(
            f"Ill-formatted type: {schema_type} is not a valid JSON schema instance"
        )
    return ValidationResult.ok()
