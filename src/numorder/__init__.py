"""numorder: ordering of numeric values, optionally by absolute value."""

from numorder._version import __version__
from numorder.core import (
    CONTEXT_ABSOLUTE,
    ComparatorContext,
    CompareResult,
    NumberComparator,
    Ordering,
    get_instance,
)
from numorder.errors import (
    ConfigError,
    InvalidArgumentError,
    NumorderError,
    ParseError,
)

__all__ = [
    "CONTEXT_ABSOLUTE",
    "ComparatorContext",
    "CompareResult",
    "ConfigError",
    "InvalidArgumentError",
    "NumberComparator",
    "NumorderError",
    "Ordering",
    "ParseError",
    "__version__",
    "get_instance",
]
