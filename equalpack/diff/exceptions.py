"""Diff subsystem exceptions."""

from __future__ import annotations

from typing import Any


class EqualityAssertionError(AssertionError):
    """Raised by ``assert_equal`` when two values are not equivalent."""

    def __init__(self, message: str, *, actual: Any, expected: Any, changes: dict[Any, Any]) -> None:
        super().__init__(message)
        self.actual = actual
        self.expected = expected
        self.changes = changes
