import pytest

from equalpack.core import VisitationStacks


def test_find_cycle_returns_none_for_unvisited_pair() -> None:
    stacks = VisitationStacks()

    assert stacks.find_cycle({}, {}) is None


def test_visiting_pushes_pairs_and_pops_on_exit() -> None:
    stacks = VisitationStacks()
    left = {"side": "left"}
    right = {"side": "right"}

    with stacks.visiting(left, right):
        assert len(stacks) == 1
        assert stacks.left == [left]
        assert stacks.right == [right]

    assert len(stacks) == 0


def test_visiting_pops_when_comparison_raises() -> None:
    stacks = VisitationStacks()

    with pytest.raises(RuntimeError):
        with stacks.visiting([], []):
            raise RuntimeError("collaborator failure")

    assert stacks.left == []
    assert stacks.right == []


def test_find_cycle_requires_both_sides_at_same_depth() -> None:
    stacks = VisitationStacks()
    outer_left, outer_right = {"depth": 0}, {"depth": 0}
    inner_left, inner_right = {"depth": 1}, {"depth": 1}

    with stacks.visiting(outer_left, outer_right):
        with stacks.visiting(inner_left, inner_right):
            assert stacks.find_cycle(outer_left, outer_right) is True
            assert stacks.find_cycle(inner_left, inner_right) is True
            assert stacks.find_cycle(outer_left, inner_right) is False
            assert stacks.find_cycle({}, outer_right) is False


def test_find_cycle_matches_by_identity_not_structure() -> None:
    stacks = VisitationStacks()
    left = {"a": 1}

    with stacks.visiting(left, {"a": 1}):
        assert stacks.find_cycle({"a": 1}, {"a": 1}) is None
