"""Ready-made asymmetric matchers for partial and pattern-style assertions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import re
from typing import Any

from equalpack.core.types import MISSING
from equalpack.equality import equals, get_key, has_key
from equalpack.matchers.base import AsymmetricMatcher


class Anything(AsymmetricMatcher):
    """Matches every value except ``None`` and ``MISSING``."""

    def asymmetric_match(self, other: Any) -> bool:
        return other is not None and other is not MISSING


class AnyInstance(AsymmetricMatcher):
    """Matches instances of any of the given types."""

    def __init__(self, *types: type) -> None:
        if not types:
            raise ValueError("any_instance requires at least one type")
        self.types = types

    def asymmetric_match(self, other: Any) -> bool:
        return isinstance(other, self.types)

    def describe(self) -> str:
        return ", ".join(cls.__name__ for cls in self.types)


class ObjectContaining(AsymmetricMatcher):
    """Matches objects holding at least the expected keys with equal values.

    Keys are mapping keys for mappings and attribute names for other objects.
    """

    def __init__(self, expected: Mapping[Any, Any]) -> None:
        self.expected = dict(expected)

    def asymmetric_match(self, other: Any) -> bool:
        if other is None or other is MISSING:
            return False
        for key, value in self.expected.items():
            if not has_key(other, key):
                return False
            if not equals(get_key(other, key), value):
                return False
        return True

    def describe(self) -> str:
        return repr(self.expected)


class ArrayContaining(AsymmetricMatcher):
    """Matches sequences that contain every expected item, in any order."""

    def __init__(self, expected: Iterable[Any]) -> None:
        self.expected = list(expected)

    def asymmetric_match(self, other: Any) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes, bytearray)):
            return False
        return all(
            any(equals(item, expected_item) for item in other)
            for expected_item in self.expected
        )

    def describe(self) -> str:
        return repr(self.expected)


class StringContaining(AsymmetricMatcher):
    def __init__(self, text: str) -> None:
        self.text = text

    def asymmetric_match(self, other: Any) -> bool:
        return isinstance(other, str) and self.text in other

    def describe(self) -> str:
        return repr(self.text)


class StringMatching(AsymmetricMatcher):
    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def asymmetric_match(self, other: Any) -> bool:
        return isinstance(other, str) and self.pattern.search(other) is not None

    def describe(self) -> str:
        return repr(self.pattern.pattern)


def anything() -> Anything:
    return Anything()


def any_instance(*types: type) -> AnyInstance:
    return AnyInstance(*types)


def object_containing(expected: Mapping[Any, Any]) -> ObjectContaining:
    return ObjectContaining(expected)


def array_containing(expected: Iterable[Any]) -> ArrayContaining:
    return ArrayContaining(expected)


def string_containing(text: str) -> StringContaining:
    return StringContaining(text)


def string_matching(pattern: str | re.Pattern[str]) -> StringMatching:
    return StringMatching(pattern)
