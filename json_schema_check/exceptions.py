"""Custom exceptions for json-schema-check."""


class SchemaCheckError(Exception):
    """Base exception for json-schema-check errors."""

    pass


class UnvalidatedSchemaError(SchemaCheckError):
    """Raised when data is validated against a schema that never passed validate_schema."""

    pass


class SchemaDocumentError(SchemaCheckError):
    """Raised when a schema document loaded from disk is not a valid schema."""

    pass
