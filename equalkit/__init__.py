"""Stable public API surface for EqualKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from equalpack.core import MISSING, Boxed
from equalpack.diff import (
    AssertionResult,
    EqualityAssertionError,
    FieldChange,
    assert_equal as _assert_equal,
    check_equal as _check_equal,
    object_diff as _object_diff,
)
from equalpack.documents import read_document
from equalpack.equality import equals as _equals
from equalpack.matchers import (
    AsymmetricMatcher,
    any_instance,
    anything,
    array_containing,
    object_containing,
    string_containing,
    string_matching,
)

__version__ = "0.1.0"


def equals(a: Any, b: Any, strict: bool = False) -> bool:
    """Return whether ``a`` and ``b`` are deeply equivalent."""
    return _equals(a, b, strict)


def object_diff(a: Any, b: Any, *, strict: bool = False) -> dict[Any, FieldChange]:
    """Return ``{key: FieldChange(old, new)}`` for each top-level key that differs."""
    return _object_diff(a, b, strict=strict)


def check_equal(actual: Any, expected: Any, *, strict: bool = False) -> AssertionResult:
    """Compare ``actual`` against ``expected`` without raising."""
    return _check_equal(actual, expected, strict=strict)


def assert_equal(
    actual: Any,
    expected: Any,
    *,
    strict: bool = False,
    message: str | None = None,
) -> None:
    """Raise ``EqualityAssertionError`` with a field-level diff unless equal."""
    _assert_equal(actual, expected, strict=strict, message=message)


def diff_files(
    left: str | Path,
    right: str | Path,
    *,
    strict: bool = False,
) -> AssertionResult:
    """Compare two JSON documents; changes read ``left`` -> ``right``."""
    return _check_equal(read_document(right), read_document(left), strict=strict)


__all__ = [
    "__version__",
    "MISSING",
    "Boxed",
    "AssertionResult",
    "FieldChange",
    "EqualityAssertionError",
    "AsymmetricMatcher",
    "equals",
    "object_diff",
    "check_equal",
    "assert_equal",
    "diff_files",
    "anything",
    "any_instance",
    "object_containing",
    "array_containing",
    "string_containing",
    "string_matching",
]
