"""numorder error hierarchy.

Every error follows the format:
  WHAT happened → WHY it matters → HOW to fix
"""

from __future__ import annotations

from typing import Any

from numorder._constants import POSITION_BOTH, POSITION_FIRST, POSITION_SECOND


class NumorderError(Exception):
    """Base error for all numorder operations."""


class InvalidArgumentError(NumorderError, TypeError):
    """An operand handed to the comparator is not a number.

    Attributes:
        position: Which operand was rejected: "first", "second" or "both".
        actual_types: Qualified type names of the rejected operand(s).
    """

    def __init__(
        self,
        message: str,
        *,
        position: str,
        actual_types: tuple[str, ...],
    ):
        super().__init__(message)
        self.position = position
        self.actual_types = actual_types


class ConfigError(NumorderError):
    """Invalid configuration file or comparator context."""


class ParseError(NumorderError, ValueError):
    """Command-line text that cannot be read as a numeric value."""


def type_name(value: Any) -> str:
    """Return the qualified type name of ``value`` (``builtins`` omitted)."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


_ACCEPTED = "  Accepted operands: None, integers, and real numbers (float, Decimal, Fraction).\n"


def invalid_first_argument(value: Any) -> InvalidArgumentError:
    """Build the error for a non-numeric first operand."""
    actual = type_name(value)
    msg = f"The first argument was not a number but {actual}: {value!r}.\n\n"
    msg += "  Only numeric values have an ordering under this comparator.\n"
    msg += _ACCEPTED
    msg += "\n  Fix: Convert or filter the first value before comparing.\n"
    return InvalidArgumentError(
        msg, position=POSITION_FIRST, actual_types=(actual,)
    )


def invalid_second_argument(value: Any) -> InvalidArgumentError:
    """Build the error for a non-numeric second operand."""
    actual = type_name(value)
    msg = f"The second argument was not a number but {actual}: {value!r}.\n\n"
    msg += "  Only numeric values have an ordering under this comparator.\n"
    msg += _ACCEPTED
    msg += "\n  Fix: Convert or filter the second value before comparing.\n"
    return InvalidArgumentError(
        msg, position=POSITION_SECOND, actual_types=(actual,)
    )


def invalid_both_arguments(first: Any, second: Any) -> InvalidArgumentError:
    """Build the error for two non-numeric operands."""
    actual = (type_name(first), type_name(second))
    msg = (
        "Both arguments were not numbers. "
        f"They are {actual[0]} and {actual[1]}: {first!r}, {second!r}.\n\n"
    )
    msg += "  Only numeric values have an ordering under this comparator.\n"
    msg += _ACCEPTED
    msg += "\n  Fix: Check that the values being compared come from a numeric column.\n"
    return InvalidArgumentError(msg, position=POSITION_BOTH, actual_types=actual)


def unknown_context_error(name: str, known: list[str]) -> ConfigError:
    """Build error for a comparator context nobody recognizes."""
    msg = f"Unknown comparator context '{name}'.\n\n"
    msg += f"  Known contexts: {known}\n"
    msg += "  Fix: Use one of the known names, or omit the context for signed ordering.\n"
    return ConfigError(msg)
