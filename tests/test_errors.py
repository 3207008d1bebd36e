"""Tests for error formatting and helpers."""

from __future__ import annotations

from decimal import Decimal

from numorder.errors import (
    ConfigError,
    InvalidArgumentError,
    NumorderError,
    ParseError,
    invalid_both_arguments,
    invalid_first_argument,
    invalid_second_argument,
    type_name,
    unknown_context_error,
)


class TestErrorHierarchy:
    def test_all_errors_inherit_from_numorder_error(self):
        for cls in [InvalidArgumentError, ConfigError, ParseError]:
            assert issubclass(cls, NumorderError)

    def test_builtin_bases(self):
        assert issubclass(InvalidArgumentError, TypeError)
        assert issubclass(ParseError, ValueError)


class TestTypeName:
    def test_builtin(self):
        assert type_name("x") == "str"

    def test_qualified(self):
        assert type_name(Decimal(1)) == "decimal.Decimal"


class TestInvalidArgumentBuilders:
    def test_first(self):
        err = invalid_first_argument("text")
        assert isinstance(err, InvalidArgumentError)
        assert err.position == "first"
        assert err.actual_types == ("str",)
        assert "first argument" in str(err)
        assert "'text'" in str(err)

    def test_second(self):
        err = invalid_second_argument([1])
        assert err.position == "second"
        assert err.actual_types == ("list",)
        assert "second argument" in str(err)

    def test_both(self):
        err = invalid_both_arguments("a", {"b": 1})
        assert err.position == "both"
        assert err.actual_types == ("str", "dict")
        assert "str and dict" in str(err)

    def test_shows_fix(self):
        msg = str(invalid_first_argument(object()))
        assert "Fix:" in msg


class TestUnknownContextError:
    def test_basic(self):
        err = unknown_context_error("Locale", ["AbsoluteValue"])
        assert isinstance(err, ConfigError)
        assert "Locale" in str(err)
        assert "AbsoluteValue" in str(err)
