"""Assertion helpers for test suites and CI-oriented regression checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from equalpack.diff.engine import object_diff
from equalpack.diff.exceptions import EqualityAssertionError
from equalpack.diff.formatting import render_assertion, render_key
from equalpack.diff.models import FieldChange
from equalpack.equality import equals


@dataclass(slots=True)
class AssertionResult:
    """Outcome of comparing an actual value against an expected one.

    ``changes`` maps each differing key to ``FieldChange(old=expected,
    new=actual)``.
    """

    actual: Any
    expected: Any
    passed: bool
    strict: bool = False
    changes: dict[Any, FieldChange] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "strict": self.strict,
            "change_count": len(self.changes),
            "changes": {
                render_key(key): change.to_dict() for key, change in self.changes.items()
            },
            "root": None,
        }
        if not self.passed and not self.changes:
            payload["root"] = FieldChange(old=self.expected, new=self.actual).to_dict()
        return payload


def check_equal(actual: Any, expected: Any, *, strict: bool = False) -> AssertionResult:
    """Compare ``actual`` against ``expected`` and return the outcome."""
    passed = equals(actual, expected, strict)
    changes = {} if passed else object_diff(expected, actual, strict=strict)
    return AssertionResult(
        actual=actual,
        expected=expected,
        passed=passed,
        strict=strict,
        changes=changes,
    )


def assert_equal(
    actual: Any,
    expected: Any,
    *,
    strict: bool = False,
    message: str | None = None,
    max_changes: int = 8,
) -> None:
    """Raise ``EqualityAssertionError`` unless ``actual`` equals ``expected``."""
    result = check_equal(actual, expected, strict=strict)
    if result.passed:
        return

    rendered = render_assertion(result, max_changes=max_changes)
    if message:
        rendered = f"{message}\n{rendered}"
    raise EqualityAssertionError(
        rendered,
        actual=actual,
        expected=expected,
        changes=result.changes,
    )
