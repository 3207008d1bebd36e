"""Shared test fixtures for numorder tests."""

from __future__ import annotations

import pytest

from numorder.core import NumberComparator, get_instance


@pytest.fixture
def comparator() -> NumberComparator:
    """A fresh comparator in signed mode."""
    return NumberComparator()


@pytest.fixture
def absolute_comparator() -> NumberComparator:
    """A fresh comparator in absolute mode."""
    return NumberComparator(absolute=True)


@pytest.fixture
def shared_comparator():
    """The process-wide comparator, with its mode restored afterwards."""
    shared = get_instance()
    saved = shared.is_absolute()
    yield shared
    shared.set_absolute(saved)
