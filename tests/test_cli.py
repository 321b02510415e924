"""Tests for the json-schema-check CLI."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from json_schema_check.cli import app

runner = CliRunner()

SCHEMA = {
    "type": "object",
    "required": ["from", "to"],
    "properties": {
        "from": {"type": "string", "minLength": 3},
        "to": {"type": "array", "items": {"type": "string"}, "minItems": 1},
    },
}


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restores root logging, since the CLI reconfigures it on every run."""
    monkeypatch.setenv("JSON_SCHEMA_CHECK_LOG_LEVEL", "INFO")
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _write_json(path: Path, payload: object) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_check_schema_valid(tmp_path: Path) -> None:
    """Exits 0 for a well-formed schema."""
    schema_file = _write_json(tmp_path / "schema.json", SCHEMA)
    result = runner.invoke(app, ["check-schema", schema_file])
    assert result.exit_code == 0


def test_check_schema_invalid(tmp_path: Path) -> None:
    """Exits 1 for a malformed schema."""
    schema_file = _write_json(tmp_path / "schema.json", {"type": "array"})
    result = runner.invoke(app, ["check-schema", schema_file])
    assert result.exit_code == 1


def test_check_schema_missing_file(tmp_path: Path) -> None:
    """Exits 1 when the schema file does not exist."""
    result = runner.invoke(app, ["check-schema", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_check_data_all_valid(tmp_path: Path) -> None:
    """Exits 0 when every data file conforms."""
    schema_file = _write_json(tmp_path / "schema.json", SCHEMA)
    first = _write_json(tmp_path / "a.json", {"from": "alice", "to": ["bob"]})
    second = _write_json(tmp_path / "b.json", {"from": "carol", "to": ["dan", "eve"]})

    result = runner.invoke(app, ["--verbose", "check-data", schema_file, first, second])

    assert result.exit_code == 0


def test_check_data_some_invalid(tmp_path: Path) -> None:
    """Exits 1 when any data file fails."""
    schema_file = _write_json(tmp_path / "schema.json", SCHEMA)
    good = _write_json(tmp_path / "good.json", {"from": "alice", "to": ["bob"]})
    bad = _write_json(tmp_path / "bad.json", {"from": "al", "to": ["bob"]})

    result = runner.invoke(app, ["check-data", schema_file, good, bad])

    assert result.exit_code == 1


def test_check_data_invalid_schema(tmp_path: Path) -> None:
    """Exits 2 when the schema itself is invalid."""
    schema_file = _write_json(tmp_path / "schema.json", {"type": "object"})
    data = _write_json(tmp_path / "data.json", {})

    result = runner.invoke(app, ["check-data", schema_file, data])

    assert result.exit_code == 2


def test_invalid_log_level_exits_cleanly(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Exits 1 without a traceback when the configured log level is unknown."""
    monkeypatch.setenv("JSON_SCHEMA_CHECK_LOG_LEVEL", "chatty")
    schema_file = _write_json(tmp_path / "schema.json", SCHEMA)

    result = runner.invoke(app, ["check-schema", schema_file])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
