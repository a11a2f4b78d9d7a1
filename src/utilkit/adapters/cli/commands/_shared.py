"""Helpers shared by the transformation commands.

Contents:
    * :func:`reject_invalid_input` - map input errors to ``ExitCode.INVALID_ARGUMENT``.
    * :func:`parse_records` - validate a JSON array into domain records.
    * :func:`parse_json_array` - decode an arbitrary JSON array.
    * :func:`parse_number` - parse int-or-float text.
    * :func:`echo_json` - print a value as JSON.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import orjson
import rich_click as click
from pydantic import TypeAdapter

from utilkit.domain.errors import InvalidArgumentError

from ..exit_codes import ExitCode

T = TypeVar("T")


@contextmanager
def reject_invalid_input() -> Iterator[None]:
    """Turn any ValueError raised in the block into exit code 22.

    pydantic's ValidationError and orjson's JSONDecodeError are both
    ValueError subclasses, as is :class:`InvalidArgumentError`.
    """
    try:
        yield
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def parse_records(raw: str, record_type: type[T]) -> list[T]:
    """Validate *raw* JSON as a list of *record_type* dataclass instances.

    Example:
        >>> from utilkit.domain.models import Product
        >>> parse_records('[{"name": "x", "price": 3}]', Product)[0].name
        'x'
    """
    return TypeAdapter(list[record_type]).validate_json(raw)  # type: ignore[valid-type]


def parse_json_array(raw: str) -> list[Any]:
    """Decode *raw* and require a JSON array.

    Raises:
        InvalidArgumentError: If the document is valid JSON but not an array.
    """
    value = orjson.loads(raw)
    if not isinstance(value, list):
        raise InvalidArgumentError(f"Expected a JSON array, got {type(value).__name__}: {raw}")
    return value


def parse_number(raw: str) -> int | float:
    """Parse *raw* as an int when integral text, otherwise as a float.

    Example:
        >>> parse_number("4"), parse_number("2.5")
        (4, 2.5)

    Raises:
        InvalidArgumentError: If *raw* is not a number, or is infinite or NaN.
    """
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"Not a number: {raw!r}") from exc
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Not a finite number: {raw!r}")
    return value


def echo_json(value: object) -> None:
    """Print *value* as compact JSON; dataclasses serialize natively."""
    click.echo(orjson.dumps(value).decode())


__all__ = [
    "echo_json",
    "parse_json_array",
    "parse_number",
    "parse_records",
    "reject_invalid_input",
]
