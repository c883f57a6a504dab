"""Paired visitation stacks used to detect cycles during deep comparison."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class VisitationStacks:
    """Ancestors currently under comparison, one list per side.

    Entry ``i`` of ``left`` and ``right`` were pushed together, so both lists
    always have the same length. Entries are matched by identity only.
    """

    left: list[Any] = field(default_factory=list)
    right: list[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.left)

    def find_cycle(self, left: Any, right: Any) -> bool | None:
        """Resolve a recurring pair, innermost ancestor first.

        Returns ``None`` when neither value is an ancestor. A value that recurs
        on one side only is never equal to the other.
        """
        for depth in range(len(self.left) - 1, -1, -1):
            if self.left[depth] is left:
                return self.right[depth] is right
            if self.right[depth] is right:
                return False
        return None

    @contextmanager
    def visiting(self, left: Any, right: Any) -> Iterator[None]:
        self.left.append(left)
        self.right.append(right)
        try:
            yield
        finally:
            self.left.pop()
            self.right.pop()
