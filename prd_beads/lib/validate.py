"""
Schema validation for PRD conversion.

Checks the PRD on the way in and every issue on the way out against the
JSON Schemas shipped in prd_beads/schemas/. Input is parsed strictly:
NaN and Infinity are not JSON and are rejected.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


class ValidationError(Exception):
    """Data didn't match its schema, or the file could not be read at all."""

    def __init__(self, schema_name: str, message: str, path: str = None):
        self.schema_name = schema_name
        self.path = path
        super().__init__(f"[{schema_name}] {message}" + (f" at {path}" if path else ""))


@lru_cache(maxsize=None)
def _get_validator(schema_name: str) -> jsonschema.Draft7Validator:
    schema_path = SCHEMAS_DIR / f"{schema_name}.schema.json"
    return jsonschema.Draft7Validator(json.loads(schema_path.read_text(encoding="utf-8")))


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def validate(data: Any, schema_name: str) -> None:
    """Validate data against a named schema ("prd" or "issue").

    Raises:
        ValidationError: With the most relevant schema error and its JSON path
    """
    error = best_match(_get_validator(schema_name).iter_errors(data))
    if error is not None:
        path = ".".join(str(p) for p in error.absolute_path) or "(root)"
        raise ValidationError(schema_name, error.message, path)


def validate_file(filepath: Path, schema_name: str) -> Any:
    """
    Load JSON file and validate against schema.

    Returns:
        Parsed and validated data

    Raises:
        ValidationError: If file is missing, unreadable, not JSON, or doesn't match schema
    """
    if not filepath.exists():
        raise ValidationError(schema_name, f"File not found: {filepath}")

    try:
        text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(schema_name, f"Cannot read {filepath}: {e}") from None

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ValidationError(schema_name, f"Invalid JSON in {filepath}: {e}") from None

    validate(data, schema_name)
    return data


def validate_before_write(data: dict, schema_name: str, filepath: Path) -> None:
    """Validate one record bound for filepath; nothing invalid gets written.

    Raises:
        ValidationError: If data doesn't match schema
    """
    try:
        validate(data, schema_name)
    except ValidationError as e:
        raise ValidationError(schema_name, f"Refusing to write {filepath}: {e}") from None
