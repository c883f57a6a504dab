import threading
from typing import Any

import pytest

from equalpack.core import VisitationStacks
from equalpack.equality import equals
from equalpack.equality.engine import _eq


def _self_loop() -> dict[str, Any]:
    node: dict[str, Any] = {}
    node["self"] = node
    return node


class _Link:
    def __init__(self, name: str) -> None:
        self.name = name
        self.next: Any = None


@pytest.mark.parametrize("strict", [False, True])
def test_self_referencing_mappings_are_equal(strict: bool) -> None:
    assert equals(_self_loop(), _self_loop(), strict) is True


def test_self_reference_at_different_depth_is_unequal() -> None:
    c: dict[str, Any] = {}
    c["self"] = c
    d: dict[str, Any] = {"inner": {}}
    d["inner"]["self"] = d

    assert equals(c, d) is False
    assert equals(d, c) is False


def test_asymmetric_recursion_is_never_equal() -> None:
    short: dict[str, Any] = {}
    short["next"] = short
    long: dict[str, Any] = {"next": {}}
    long["next"]["next"] = long

    assert equals(short, long) is False
    assert equals(long, short) is False


def test_self_referencing_lists_are_equal() -> None:
    left: list[Any] = [1]
    left.append(left)
    right: list[Any] = [1]
    right.append(right)

    assert equals(left, right) is True
    right[0] = 2
    assert equals(left, right) is False


def test_mutually_referencing_objects_are_equal() -> None:
    a1, a2 = _Link("a"), _Link("b")
    a1.next, a2.next = a2, a1
    b1, b2 = _Link("a"), _Link("b")
    b1.next, b2.next = b2, b1

    assert equals(a1, b1) is True
    assert equals(a1, b2) is False


def test_cycle_through_shared_ancestor_on_one_side_only() -> None:
    shared = {"value": 1}
    left = {"first": shared, "second": shared}
    right = {"first": {"value": 1}, "second": {"value": 1}}

    # Shared siblings are not ancestors of each other.
    assert equals(left, right) is True


@pytest.mark.parametrize("strict", [False, True])
def test_cyclic_structure_is_reflexive(strict: bool) -> None:
    node = _self_loop()

    assert equals(node, node, strict) is True
    assert equals({"root": node}, {"root": node}, strict) is True


def test_stacks_are_empty_after_failed_comparison() -> None:
    stacks = VisitationStacks()
    left = {"items": [{"id": 1}, {"id": 2}]}
    right = {"items": [{"id": 1}, {"id": 3}]}

    assert _eq(left, right, stacks, False) is False
    assert len(stacks) == 0


def test_stacks_are_empty_after_collaborator_raises() -> None:
    class _Exploding:
        def asymmetric_match(self, other: Any) -> bool:
            raise RuntimeError("matcher failure")

    stacks = VisitationStacks()

    with pytest.raises(RuntimeError, match="matcher failure"):
        _eq({"nested": {"value": 1}}, {"nested": {"value": _Exploding()}}, stacks, False)

    assert len(stacks) == 0


def test_concurrent_comparisons_share_inputs_without_interference() -> None:
    left = _self_loop()
    right = _self_loop()
    other: dict[str, Any] = {"inner": {}}
    other["inner"]["self"] = other
    barrier = threading.Barrier(8)
    results: list[tuple[bool, bool]] = []
    lock = threading.Lock()

    def compare() -> None:
        barrier.wait(timeout=5)
        for _ in range(200):
            outcome = (equals(left, right), equals(left, other))
            with lock:
                results.append(outcome)

    threads = [threading.Thread(target=compare, daemon=True) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert len(results) == 8 * 200
    assert set(results) == {(True, False)}
