"""Parsing of command-line text into comparable values."""

from __future__ import annotations

import re

from numorder._constants import NULL_TOKENS
from numorder.errors import ParseError

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_value(text: str, *, strict: bool = False) -> int | float | str | None:
    """Parse a token like '42', '-2.5', '1e3', 'nan' or 'null'.

    Accepts:
        - "null", "none", "-" → None
        - "42", "-7" → int
        - "2.5", "1e3", "inf", "nan" → float
        - anything else → the stripped text, or ParseError when ``strict``
    """
    value = text.strip()
    if value.lower() in NULL_TOKENS:
        return None
    if _INT_PATTERN.match(value):
        return int(value)
    try:
        return float(value)
    except ValueError:
        if strict:
            raise ParseError(
                f"Invalid numeric value '{value}'. "
                "Expected an integer, a float, or 'null'."
            ) from None
        return value


def format_value(value: int | float | str | None) -> str:
    """Format a parsed value back for display."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return repr(value)
    return str(value)
