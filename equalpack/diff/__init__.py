"""Diff subsystem for EqualKit."""

from equalpack.diff.assertion import AssertionResult, assert_equal, check_equal
from equalpack.diff.engine import object_diff
from equalpack.diff.exceptions import EqualityAssertionError
from equalpack.diff.formatting import render_assertion, render_changes, render_value
from equalpack.diff.models import MISSING_MARKER, FieldChange, ObjectDiff

__all__ = [
    "FieldChange",
    "ObjectDiff",
    "MISSING_MARKER",
    "object_diff",
    "AssertionResult",
    "EqualityAssertionError",
    "check_equal",
    "assert_equal",
    "render_value",
    "render_changes",
    "render_assertion",
]
