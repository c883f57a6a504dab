"""Asymmetric matchers for EqualKit."""

from equalpack.matchers.base import AsymmetricMatcher
from equalpack.matchers.builtins import (
    AnyInstance,
    Anything,
    ArrayContaining,
    ObjectContaining,
    StringContaining,
    StringMatching,
    any_instance,
    anything,
    array_containing,
    object_containing,
    string_containing,
    string_matching,
)

__all__ = [
    "AsymmetricMatcher",
    "Anything",
    "AnyInstance",
    "ObjectContaining",
    "ArrayContaining",
    "StringContaining",
    "StringMatching",
    "anything",
    "any_instance",
    "object_containing",
    "array_containing",
    "string_containing",
    "string_matching",
]
