from __future__ import annotations

from collections.abc import Iterable

from pytest_cases import parametrize

from enumkit import drop, none
from enumkit._functional import as_items, count_items, is_one_shot


def test_drop_removes_every_matching_value() -> None:
    assert drop([1, 2, 1, 3, 1, 4, 1, 5], 1) == [2, 3, 4, 5]
    assert drop([1, None, 1, 3, None, None, 1, 5], None) == [1, 1, 3, 1, 5]


def test_drop_keeps_everything_without_a_match() -> None:
    assert drop(range(4), 10) == [0, 1, 2, 3]
    assert drop([], 1) == []


def test_none() -> None:
    assert none([1, 2, 3, 4, 5], lambda x: x % 2 == 0) is False
    assert none([1, 3, 5, 7, 9], lambda x: x % 2 == 0) is True
    assert none([], lambda _: True) is True


def test_as_items_gives_pairs_for_mappings() -> None:
    d = {"a": 1, "b": 2}
    assert list(as_items(d)) == [("a", 1), ("b", 2)]

    xs = [1, 2]
    assert as_items(xs) is xs


@parametrize(
    "xs",
    [[1, 2, 3], (1, 2, 3), {1, 2, 3}, range(3), (x for x in range(3))],
    idgen=lambda xs: xs.__class__.__name__,
)
def test_count_items(xs: Iterable[int]) -> None:
    assert count_items(xs) == 3


def test_is_one_shot() -> None:
    assert is_one_shot(iter([1]))
    assert is_one_shot(x for x in [1])
    assert not is_one_shot([1])
    assert not is_one_shot({1: 2})
