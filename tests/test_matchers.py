from dataclasses import dataclass
import re

import pytest

from equalpack.core import MISSING
from equalpack.equality import equals
from equalpack.matchers import (
    AsymmetricMatcher,
    any_instance,
    anything,
    array_containing,
    object_containing,
    string_containing,
    string_matching,
)


@dataclass
class _Order:
    id: int
    status: str


def test_anything_rejects_only_absent_values() -> None:
    matcher = anything()

    assert matcher.asymmetric_match(0) is True
    assert matcher.asymmetric_match("") is True
    assert matcher.asymmetric_match(None) is False
    assert matcher.asymmetric_match(MISSING) is False


def test_anything_does_not_accept_absent_key() -> None:
    assert equals({"id": 1, "name": "a"}, {"id": 1, "name": anything()}) is True
    assert equals({"id": 1}, {"id": 1, "name": anything()}) is False


def test_any_instance_checks_types() -> None:
    assert equals(3, any_instance(int)) is True
    assert equals(3.5, any_instance(int, float)) is True
    assert equals("3", any_instance(int)) is False


def test_any_instance_requires_types() -> None:
    with pytest.raises(ValueError, match="at least one type"):
        any_instance()


def test_object_containing_matches_mapping_subsets() -> None:
    matcher = object_containing({"id": 1, "tags": array_containing(["b"])})

    assert equals({"id": 1, "tags": ["a", "b"], "extra": True}, matcher) is True
    assert equals({"id": 2, "tags": ["b"]}, matcher) is False
    assert equals({"tags": ["b"]}, matcher) is False
    assert equals(None, matcher) is False


def test_object_containing_matches_object_attributes() -> None:
    assert equals(_Order(id=1, status="paid"), object_containing({"status": "paid"})) is True
    assert equals(_Order(id=1, status="open"), object_containing({"status": "paid"})) is False


def test_array_containing_ignores_order_and_extra_items() -> None:
    matcher = array_containing([3, {"id": 1}])

    assert equals([{"id": 1}, 2, 3], matcher) is True
    assert equals([1, 2], matcher) is False
    assert equals("31", array_containing(["3"])) is False


def test_string_matchers() -> None:
    assert equals("order-42 created", string_containing("42")) is True
    assert equals(42, string_containing("42")) is False
    assert equals("order-42", string_matching(r"^order-\d+$")) is True
    assert equals("order-x", string_matching(re.compile(r"\d"))) is False


def test_matchers_support_plain_equality_operator() -> None:
    assert {"id": 5, "status": "paid"} == {"id": any_instance(int), "status": "paid"}
    assert "abc" != string_containing("z")


def test_matchers_are_unhashable_and_readable() -> None:
    matcher = object_containing({"id": 1})

    with pytest.raises(TypeError):
        hash(matcher)
    assert repr(matcher) == "ObjectContaining({'id': 1})"
    assert repr(any_instance(int, str)) == "AnyInstance(int, str)"
    assert repr(anything()) == "Anything()"


def test_custom_matcher_subclass() -> None:
    class Between(AsymmetricMatcher):
        def __init__(self, low: int, high: int) -> None:
            self.low = low
            self.high = high

        def asymmetric_match(self, other: object) -> bool:
            return isinstance(other, int) and self.low <= other <= self.high

    assert equals({"score": 7}, {"score": Between(1, 10)}) is True
    assert equals({"score": 11}, {"score": Between(1, 10)}) is False
