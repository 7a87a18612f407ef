"""Parsing helpers that return Results instead of raising.

Errors are human-readable strings prefixed with what was being parsed, e.g.
``Err("Invalid number: abc")``.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any

import msgspec

from railway.types.result import Err, Ok, Result

__all__ = ["parse_date", "parse_json", "parse_number"]

_INTEGER = re.compile(r"[+-]?\d+")


def parse_number(text: str) -> Result[int | float, str]:
    """Parse an integer or floating point literal.

    Integer literals give an ``int``; anything else ``float`` accepts gives a
    ``float``. Surrounding whitespace is ignored and NaN is rejected.

    Examples:
        >>> parse_number("42")
        Ok(value=42)
        >>> parse_number("2.5e3")
        Ok(value=2500.0)
        >>> parse_number("abc")
        Err(error='Invalid number: abc')
    """
    stripped = text.strip()
    if _INTEGER.fullmatch(stripped):
        return Ok(int(stripped))
    try:
        number = float(stripped)
    except ValueError:
        return Err(f"Invalid number: {text}")
    if math.isnan(number):
        return Err(f"Invalid number: {text}")
    return Ok(number)


def parse_date(text: str) -> Result[datetime, str]:
    """Parse an ISO-8601 date or datetime with ``datetime.fromisoformat``.

    Examples:
        >>> parse_date("2024-02-29")
        Ok(value=datetime.datetime(2024, 2, 29, 0, 0))
        >>> parse_date("2023-02-29")
        Err(error='Invalid date: 2023-02-29')
    """
    try:
        return Ok(datetime.fromisoformat(text.strip()))
    except ValueError:
        return Err(f"Invalid date: {text}")


def parse_json(text: str | bytes, *, type: Any = Any) -> Result[Any, str]:
    """Decode JSON with msgspec, optionally validating against ``type``.

    Args:
        text: JSON document as str or bytes.
        type: Target type for msgspec (a Struct, ``list[int]``, ...). Defaults
            to plain JSON values.

    Returns:
        Ok(decoded value), or Err("Invalid JSON: <reason>") when decoding or
        validation fails.

    Examples:
        >>> parse_json('{"a": 1}')
        Ok(value={'a': 1})
        >>> parse_json("[1, 2]", type=list[int])
        Ok(value=[1, 2])
    """
    try:
        return Ok(msgspec.json.decode(text, type=type))
    except msgspec.DecodeError as exc:
        return Err(f"Invalid JSON: {exc}")
