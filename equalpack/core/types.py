"""Type definitions for EqualKit value kinds and sentinels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ValueKind = Literal[
    "missing",
    "null",
    "matcher",
    "error",
    "node",
    "bool",
    "string",
    "number",
    "bytes",
    "boxed_bool",
    "boxed_string",
    "boxed_number",
    "date",
    "regexp",
    "array",
    "object",
    "set",
    "function",
    "value",
    "instance",
]

VALUE_KINDS: tuple[str, ...] = (
    "missing",
    "null",
    "matcher",
    "error",
    "node",
    "bool",
    "string",
    "number",
    "bytes",
    "boxed_bool",
    "boxed_string",
    "boxed_number",
    "date",
    "regexp",
    "array",
    "object",
    "set",
    "function",
    "value",
    "instance",
)

COMPOSITE_KINDS = frozenset({"array", "object", "set", "instance", "matcher", "node"})


class _MissingType:
    """Marker for a value that is not present at all."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _MissingType:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _MissingType()


@dataclass(frozen=True, slots=True)
class Boxed:
    """An explicitly wrapped primitive.

    A boxed value equals another boxed value holding the same primitive, but
    never the bare primitive itself.
    """

    value: bool | str | int | float | complex
