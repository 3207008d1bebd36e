"""Core comparator: Ordering, ComparatorContext, CompareResult, NumberComparator."""

from __future__ import annotations

import functools
import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any, Callable, NamedTuple

from numorder._constants import (
    CONTEXT_ABSOLUTE_NAME,
    FLOAT_EXACT_INT_LIMIT,
    INT64_MAX,
    INT64_MIN,
)
from numorder.errors import (
    InvalidArgumentError,
    invalid_both_arguments,
    invalid_first_argument,
    invalid_second_argument,
    unknown_context_error,
)

logger = logging.getLogger(__name__)


class Ordering(IntEnum):
    """Result of a comparison: ``LESS`` (-1), ``EQUAL`` (0) or ``GREATER`` (1)."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @property
    def symbol(self) -> str:
        return {-1: "<", 0: "=", 1: ">"}[self.value]


@dataclass(frozen=True)
class ComparatorContext:
    """Named marker selecting a comparison flavour. Carries no behaviour itself."""

    name: str

    def __str__(self) -> str:
        return self.name


CONTEXT_ABSOLUTE = ComparatorContext(CONTEXT_ABSOLUTE_NAME)

_CONTEXTS: dict[str, bool] = {CONTEXT_ABSOLUTE.name: True}


@dataclass(frozen=True)
class CompareResult:
    """Outcome of :meth:`NumberComparator.try_compare`.

    Exactly one of ``ordering`` and ``error`` is set.
    """

    ordering: Ordering | None = None
    error: InvalidArgumentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Ordering:
        """Return the ordering, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.ordering


class _Operand(NamedTuple):
    integral: bool
    int_value: int
    float_value: float


def _to_float(value: numbers.Real | Decimal) -> float:
    if isinstance(value, Decimal) and value.is_snan():
        return math.nan
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _classify(value: Any) -> _Operand | None:
    """Split a value into its integral or fractional representation.

    Returns None when the value is not numeric. ``bool`` is rejected even
    though it subclasses ``int``; ``Decimal`` is accepted although it is
    not registered as ``numbers.Real``.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return None
    if isinstance(value, numbers.Integral):
        as_int = int(value)
        if INT64_MIN <= as_int <= INT64_MAX:
            return _Operand(True, as_int, 0.0)
        return _Operand(False, 0, _to_float(as_int))
    return _Operand(False, 0, _to_float(value))


def _absolute(op: _Operand) -> _Operand:
    int_value = -op.int_value if op.int_value < 0 else op.int_value
    float_value = -op.float_value if op.float_value < 0 else op.float_value
    return _Operand(op.integral, int_value, float_value)


def _compare_ints(a: int, b: int) -> Ordering:
    return Ordering((a > b) - (a < b))


def _compare_floats(a: float, b: float) -> Ordering:
    # NaN sorts after every number and equals itself.
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return Ordering(a_nan - b_nan)
    return Ordering((a > b) - (a < b))


def _widen(value: int) -> float:
    if abs(value) > FLOAT_EXACT_INT_LIMIT:
        logger.debug("Widening %d to float may lose precision", value)
    return float(value)


class NumberComparator:
    """Orders numbers, optionally by absolute value.

    Operands are ``None``, integers that fit in 64 bits (compared exactly),
    or other real numbers (compared as floats). An integer compared with a
    float is widened to float first, so integers beyond 2**53 may compare
    equal to a nearby float.

    The ``absolute`` flag is plain instance state with no locking. Callers
    that share one comparator across threads must synchronize mode changes
    themselves, or keep one comparator per mode. Changing the mode while a
    sort is running breaks the sort.

    In absolute mode -2**63 becomes 2**63, so it sorts above 2**63 - 1.

    Args:
        absolute: Compare absolute values instead of signed values.
    """

    def __init__(self, absolute: bool = False):
        self._absolute = bool(absolute)
        logger.debug("Created NumberComparator(absolute=%s)", self._absolute)

    @classmethod
    def for_context(
        cls, context: ComparatorContext | str | None
    ) -> NumberComparator:
        """Build a comparator whose mode matches ``context``.

        ``None`` selects signed ordering. Unknown context names raise
        :class:`~numorder.errors.ConfigError`.
        """
        if context is None:
            return cls()
        name = context.name if isinstance(context, ComparatorContext) else context
        if name not in _CONTEXTS:
            raise unknown_context_error(name, sorted(_CONTEXTS))
        return cls(absolute=_CONTEXTS[name])

    def is_absolute(self) -> bool:
        return self._absolute

    def set_absolute(self, absolute: bool) -> None:
        self._absolute = bool(absolute)
        logger.debug("NumberComparator absolute mode set to %s", self._absolute)

    absolute = property(is_absolute, set_absolute)

    def try_compare(self, a: Any, b: Any) -> CompareResult:
        """Compare two values, returning failures instead of raising."""
        if a is None and b is None:
            return CompareResult(Ordering.EQUAL)
        if a is None:
            return CompareResult(Ordering.LESS)
        if b is None:
            return CompareResult(Ordering.GREATER)

        first = _classify(a)
        second = _classify(b)
        if first is None and second is None:
            return CompareResult(error=invalid_both_arguments(a, b))
        if first is None:
            return CompareResult(error=invalid_first_argument(a))
        if second is None:
            return CompareResult(error=invalid_second_argument(b))

        if self._absolute:
            first = _absolute(first)
            second = _absolute(second)

        if first.integral and second.integral:
            ordering = _compare_ints(first.int_value, second.int_value)
        elif first.integral:
            ordering = _compare_floats(_widen(first.int_value), second.float_value)
        elif second.integral:
            ordering = _compare_floats(first.float_value, _widen(second.int_value))
        else:
            ordering = _compare_floats(first.float_value, second.float_value)
        return CompareResult(ordering)

    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``.

        Raises:
            InvalidArgumentError: If a present operand is not a number.
        """
        return int(self.try_compare(a, b).unwrap())

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def sort_key(self) -> Callable[[Any], Any]:
        """Wrap :meth:`compare` for use as ``key=`` in ``sorted()``."""
        return functools.cmp_to_key(self.compare)

    def __repr__(self) -> str:
        return f"NumberComparator(absolute={self._absolute})"


_default: NumberComparator | None = None


def get_instance() -> NumberComparator:
    """Return the process-wide default comparator, creating it on first use.

    The instance lives for the rest of the process. Its mode is shared by
    every caller of this function.
    """
    global _default
    if _default is None:
        _default = NumberComparator()
    return _default
