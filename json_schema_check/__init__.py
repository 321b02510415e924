from json_schema_check.data_validator import validate_data
from json_schema_check.exceptions import (
    SchemaCheckError,
    SchemaDocumentError,
    UnvalidatedSchemaError,
)
from json_schema_check.schema_validator import validate_schema
from json_schema_check.schemas import SchemaNode, ValidationResult, parse_schema_node

__all__ = [
    "validate_data",
    "validate_schema",
    "parse_schema_node",
    "SchemaNode",
    "ValidationResult",
    "SchemaCheckError",
    "SchemaDocumentError",
    "UnvalidatedSchemaError",
]
