"""Base class for asymmetric matchers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AsymmetricMatcher(ABC):
    """A value that decides for itself whether a candidate matches it.

    The equality engine only looks for a callable ``asymmetric_match``
    member, so subclassing is optional. Subclasses also compare with ``==``.
    """

    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def asymmetric_match(self, other: Any) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        return ""

    def __eq__(self, other: object) -> bool:
        return bool(self.asymmetric_match(other))

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.describe()})"
