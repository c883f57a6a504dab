"""CLI-friendly rendering for diff reports and assertion results."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any

from equalpack.diff.models import FieldChange

if TYPE_CHECKING:
    from equalpack.diff.assertion import AssertionResult

_MAX_VALUE_WIDTH = 120


def render_key(key: Hashable) -> str:
    return key if isinstance(key, str) else repr(key)


def render_value(value: Any) -> str:
    rendered = repr(value)
    if len(rendered) > _MAX_VALUE_WIDTH:
        return rendered[: _MAX_VALUE_WIDTH - 3] + "..."
    return rendered


def render_changes(changes: Mapping[Hashable, FieldChange], *, max_changes: int = 8) -> str:
    if not changes:
        return "no differences detected"

    limit = max(1, max_changes)
    lines: list[str] = []
    for key, change in list(changes.items())[:limit]:
        lines.append(
            f"  {render_key(key)}: {render_value(change.old)} -> {render_value(change.new)}"
        )

    remaining = len(changes) - limit
    if remaining > 0:
        lines.append(f"  ... {remaining} additional change(s) not shown")
    return "\n".join(lines)


def render_assertion(result: AssertionResult, *, max_changes: int = 8) -> str:
    mode = " (strict)" if result.strict else ""
    if result.passed:
        return f"values are equal{mode}"

    lines = [f"values differ{mode}"]
    if result.changes:
        lines.append("changes:")
        lines.append(render_changes(result.changes, max_changes=max_changes))
    else:
        # Scalar roots and strict-only drift have no key-level changes.
        lines.append(f"  expected: {render_value(result.expected)}")
        lines.append(f"  actual: {render_value(result.actual)}")
    return "\n".join(lines)
