"""Pydantic schemas for typed schema nodes, validation results and CLI arguments."""

from pathlib import Path
from typing import Annotated, Any, Literal, Self, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    model_validator,
)


class ValidationResult(BaseModel):
    """Outcome of a schema or data validation."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: str | None = Field(
        None,
        description="First violation found and where it occurred; None when valid.",
    )

    @classmethod
    def ok(cls) -> Self:
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: str) -> Self:
        return cls(valid=False, reason=reason)

    def wrap(self, context: str) -> "ValidationResult":
        """
        Embed this failure's reason inside an outer context.

        Args:
            context: Where the inner failure happened (e.g. "Invalid object").

        Returns:
            ValidationResult: A failed result reading "<context>: <reason>".
        """
        return ValidationResult.fail(f"{context}: {self.reason}")

    def __bool__(self) -> bool:
        return self.valid


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Dump the node back to its JSON document form."""
        return self.model_dump(by_alias=True, exclude_none=True)


class StringSchema(_SchemaModel):
    """Schema node for text values."""

    type: Literal["string"] = "string"
    default: StrictStr | None = None
    min_length: StrictInt | None = Field(None, alias="minLength", ge=0)
    max_length: StrictInt | None = Field(None, alias="maxLength", ge=0)


class NumberSchema(_SchemaModel):
    """Schema node for numeric values."""

    type: Literal["number"] = "number"
    default: StrictInt | StrictFloat | None = None


class BooleanSchema(_SchemaModel):
    """Schema node for boolean values."""

    type: Literal["boolean"] = "boolean"
    default: StrictBool | None = None


class ArraySchema(_SchemaModel):
    """Schema node for arrays whose elements all match `items`."""

    type: Literal["array"] = "array"
    items: "SchemaNode"
    default: list[Any] | None = None
    min_items: StrictInt | None = Field(None, alias="minItems", ge=0)
    max_items: StrictInt | None = Field(None, alias="maxItems", ge=0)


class ObjectSchema(_SchemaModel):
    """Schema node for objects with a closed set of properties."""

    type: Literal["object"] = "object"
    properties: dict[str, "SchemaNode"]
    required: list[StrictStr] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_required(self) -> Self:
        """Reject empty property maps and required names with no property."""
        if not self.properties:
            raise ValueError("At least one property must be set")
        missing = [name for name in self.required if name not in self.properties]
        if missing:
            raise ValueError(
                f"Required fields are not declared as properties: {', '.join(missing)}"
            )
        return self


SchemaNode = Annotated[
    Union[StringSchema, NumberSchema, BooleanSchema, ArraySchema, ObjectSchema],
    Field(discriminator="type"),
]

ArraySchema.model_rebuild()
ObjectSchema.model_rebuild()

_SCHEMA_NODE_ADAPTER: TypeAdapter[SchemaNode] = TypeAdapter(SchemaNode)


def as_document(schema: Any) -> Any:
    """Return the JSON document form of a typed node; other inputs pass through."""
    if isinstance(schema, _SchemaModel):
        return schema.to_document()
    return schema


def parse_schema_node(document: Any) -> SchemaNode:
    """
    Build a typed schema node from an untyped document.

    Args:
        document: Parsed JSON schema document.

    Returns:
        SchemaNode: The matching typed variant.

    Raises:
        pydantic.ValidationError: If the document does not fit any variant.
    """
    return _SCHEMA_NODE_ADAPTER.validate_python(document)


class CliArgs(BaseModel):
    """CLI arguments."""

    schema_file: Path
    data_files: list[Path] = Field(default_factory=list)
