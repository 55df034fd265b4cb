"""Utility functions for file I/O and field parsing."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .constants import QUOTE_MARKER

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('qperf.utils')


def strip_marker(value: str) -> str:
    """
    Remove QuizMachine's single-quote markers from a field.

    Examples:
        "'TC'" -> "TC"
        "'Smith, John'" -> "Smith, John"
        "12" -> "12"
    """
    return value.strip().strip(QUOTE_MARKER)


def parse_int_field(value: str, default: int = 0) -> int:
    """Parse a possibly quote-wrapped numeric field, falling back to default."""
    try:
        return int(strip_marker(value))
    except ValueError:
        return default


def validate_model(schema: type[T], data: Any, source: str = 'data') -> T:
    """
    Validate data against a Pydantic model.

    Raises:
        ValueError: If validation fails
    """
    try:
        return schema(**data) if isinstance(data, dict) else schema(data)  # type: ignore[call-arg]
    except ValidationError as e:
        logger.debug(f'Schema validation failed for {source}: {e}')
        raise ValueError(f'Schema validation failed for {source}:\n{e}') from e


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Load a JSON file such as data/qperf_config.json, validating it against schema if given.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is malformed
        ValueError: If schema validation fails
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e
    logger.debug(f'Loaded JSON from: {path}')

    return validate_model(schema, data, source=str(path)) if schema else data


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """Write tabulation results (a dict or pydantic model) as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump() if isinstance(data, BaseModel) else data
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=indent, ensure_ascii=False)
    logger.debug(f'Saved JSON to: {path}')
