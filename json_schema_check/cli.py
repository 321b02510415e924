import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from json_schema_check.config import load_settings
from json_schema_check.core import check_documents, load_json_document
from json_schema_check.exceptions import SchemaDocumentError
from json_schema_check.loggy import setup_logging
from json_schema_check.schema_validator import validate_schema
from json_schema_check.schemas import CliArgs

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Validate JSON schema documents and JSON data against them."""
    if verbose:
        setup_logging(logging.DEBUG)
        return

    try:
        settings = load_settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)
    setup_logging(settings.log_level)


@app.command("check-schema")
def check_schema(
    schema_file: Path = typer.Argument(..., help="Path to the JSON schema file"),
):
    """Check that a schema document is well-formed."""
    cli_args = CliArgs(schema_file=schema_file)

    try:
        schema = load_json_document(cli_args.schema_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    result = validate_schema(schema)
    if not result:
        logger.error(f"{cli_args.schema_file}: {result.reason}")
        raise typer.Exit(code=1)
    logger.info(f"{cli_args.schema_file}: valid schema")


@app.command("check-data")
def check_data(
    schema_file: Path = typer.Argument(..., help="Path to the JSON schema file"),
    data_files: list[Path] = typer.Argument(
        ..., help="One or more JSON data files to check"
    ),
):
    """Check JSON data files against a schema."""
    cli_args = CliArgs(schema_file=schema_file, data_files=data_files)
    logger.info(
        f"Checking {len(cli_args.data_files)} file(s) against {cli_args.schema_file}"
    )

    try:
        results = check_documents(cli_args.schema_file, cli_args.data_files)
    except SchemaDocumentError as e:
        logger.error(str(e))
        raise typer.Exit(code=2)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    failures = 0
    for data_file, result in zip(cli_args.data_files, results):
        if result:
            logger.info(f"{data_file}: valid")
        else:
            failures += 1
            logger.error(f"{data_file}: {result.reason}")

    if failures:
        logger.error(f"{failures} of {len(results)} file(s) failed validation")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
