"""File-level helpers around the schema and data validators."""

import json
import logging
from pathlib import Path
from typing import Any

from json_schema_check.data_validator import validate_data
from json_schema_check.exceptions import SchemaDocumentError
from json_schema_check.schema_validator import validate_schema
from json_schema_check.schemas import ValidationResult

logger = logging.getLogger(__name__)


def load_json_document(path: Path) -> Any:
    """
    Read and decode a UTF-8 JSON file.

    Args:
        path (Path): File to read.

    Returns:
        Any: The decoded JSON value.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e


def check_documents(
    schema_path: Path, data_paths: list[Path]
) -> list[ValidationResult]:
    """
    Validate a schema file, then validate each data file against it.

    Args:
        schema_path (Path): JSON schema document.
        data_paths (list[Path]): JSON data documents.

    Returns:
        list[ValidationResult]: One result per data file, in order.

    Raises:
        SchemaDocumentError: If the schema document is not a valid schema.
        FileNotFoundError: If any file is missing.
        ValueError: If any file is not valid JSON.
    """
    schema = load_json_document(schema_path)
    schema_result = validate_schema(schema)
    if not schema_result:
        raise SchemaDocumentError(
            f"Invalid schema in {schema_path}: {schema_result.reason}"
        )
    logger.debug(f"Schema {schema_path} is valid")

    results: list[ValidationResult] = []
    for data_path in data_paths:
        result = validate_data(load_json_document(data_path), schema)
        logger.debug(f"{data_path}: valid={result.valid}")
        results.append(result)
    return results
