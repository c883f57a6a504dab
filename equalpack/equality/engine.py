"""Recursive deep-equality predicate with cycle detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from equalpack.core.kinds import (
    classify,
    error_message,
    is_asymmetric_matcher,
    same_value,
    unbox,
)
from equalpack.core.stacks import VisitationStacks
from equalpack.core.types import COMPOSITE_KINDS, MISSING
from equalpack.equality.keys import get_key, has_key, own_keys


def equals(a: Any, b: Any, strict: bool = False) -> bool:
    """Decide whether two values are deeply equivalent.

    Non-strict comparison tolerates keys that are missing on one side when the
    other side holds ``MISSING`` or an asymmetric matcher there. Strict
    comparison requires identical key sets, array lengths and container types.

    Self-referential structures are equal when both sides recur to the same
    paired ancestors. Exceptions raised by matchers, ``isEqualNode`` or a
    custom ``__eq__`` propagate unchanged.
    """
    return _eq(a, b, VisitationStacks(), strict)


def _eq(a: Any, b: Any, stacks: VisitationStacks, strict: bool) -> bool:
    verdict = _asymmetric_verdict(a, b)
    if verdict is not None:
        return verdict

    if isinstance(a, BaseException) and isinstance(b, BaseException):
        return error_message(a) == error_message(b)

    if same_value(a, b):
        return True

    # None and MISSING must never be conflated.
    if a is None or b is None:
        return a is b

    kind = classify(a)
    if kind != classify(b):
        return False

    comparator = _SCALAR_COMPARATORS.get(kind)
    if comparator is not None:
        return comparator(a, b)

    if kind not in COMPOSITE_KINDS:
        return False

    if kind == "node":
        return bool(a.isEqualNode(b))

    cycle = stacks.find_cycle(a, b)
    if cycle is not None:
        return cycle

    with stacks.visiting(a, b):
        return _eq_composite(kind, a, b, stacks, strict)


def _asymmetric_verdict(a: Any, b: Any) -> bool | None:
    asymmetric_a = is_asymmetric_matcher(a)
    asymmetric_b = is_asymmetric_matcher(b)

    if asymmetric_a and asymmetric_b:
        return None
    if asymmetric_a:
        return bool(a.asymmetric_match(b))
    if asymmetric_b:
        return bool(b.asymmetric_match(a))
    return None


def _eq_composite(
    kind: str,
    a: Any,
    b: Any,
    stacks: VisitationStacks,
    strict: bool,
) -> bool:
    if strict and type(a) is not type(b):
        return False

    if kind == "set":
        return _eq_sets(a, b, stacks, strict)

    if strict and kind == "array" and len(a) != len(b):
        return False

    a_keys = own_keys(a)
    b_keys = own_keys(b)

    # Non-strict mode lets matchers and MISSING stand in for absent keys.
    if not strict:
        for key in b_keys:
            if _tolerates_absence(get_key(b, key)) and not has_key(a, key):
                a_keys.append(key)
        for key in a_keys:
            if _tolerates_absence(get_key(a, key)) and not has_key(b, key):
                b_keys.append(key)

    if len(a_keys) != len(b_keys):
        return False

    for key in a_keys:
        a_value = get_key(a, key)
        if strict:
            present = has_key(b, key)
        else:
            present = has_key(b, key) or _tolerates_absence(a_value)
        if not present or not _eq(a_value, get_key(b, key), stacks, strict):
            return False
    return True


def _eq_sets(a: Any, b: Any, stacks: VisitationStacks, strict: bool) -> bool:
    if len(a) != len(b):
        return False

    candidates = list(b)
    matches: list[list[int]] = []
    for member in a:
        row = [
            index
            for index, candidate in enumerate(candidates)
            if _eq(member, candidate, stacks, strict)
        ]
        if not row:
            return False
        matches.append(row)

    # Each candidate pairs with at most one member.
    owners: list[int | None] = [None] * len(candidates)
    return all(_augment(member, matches, owners, set()) for member in range(len(matches)))


def _augment(
    member: int,
    matches: list[list[int]],
    owners: list[int | None],
    seen: set[int],
) -> bool:
    for index in matches[member]:
        if index in seen:
            continue
        seen.add(index)
        owner = owners[index]
        if owner is None or _augment(owner, matches, owners, seen):
            owners[index] = member
            return True
    return False


def _tolerates_absence(value: Any) -> bool:
    return value is MISSING or is_asymmetric_matcher(value)


def _eq_boxed(a: Any, b: Any) -> bool:
    return same_value(unbox(a), unbox(b))


def _eq_bytes(a: Any, b: Any) -> bool:
    return bytes(a) == bytes(b)


def _eq_loose(a: Any, b: Any) -> bool:
    return bool(a == b)


def _eq_regexp(a: Any, b: Any) -> bool:
    return a.pattern == b.pattern and a.flags == b.flags


_SCALAR_COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    "bool": same_value,
    "string": same_value,
    "number": same_value,
    "bytes": _eq_bytes,
    "boxed_bool": _eq_boxed,
    "boxed_string": _eq_boxed,
    "boxed_number": _eq_boxed,
    "date": _eq_loose,
    "regexp": _eq_regexp,
    "value": _eq_loose,
}
