"""Data models for field-level diff reporting."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from equalpack.core.types import MISSING

MISSING_MARKER = "<MISSING>"


@dataclass(slots=True)
class FieldChange:
    """Old and new value of a single key that differs."""

    old: Any
    new: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "old": export_value(self.old),
            "new": export_value(self.new),
        }


ObjectDiff = dict[Hashable, FieldChange]


def export_value(value: Any) -> Any:
    return MISSING_MARKER if value is MISSING else value
