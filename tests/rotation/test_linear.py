from __future__ import annotations

from itertools import count, islice

from enumkit.rotation.linear import iter_forward, rotate_forward


def test_moves_a_single_element_backward() -> None:
    assert rotate_forward(iter(range(7)), 1, 5, 5) == [0, 5, 1, 2, 3, 4, 6]


def test_moves_a_range_forward() -> None:
    # IndexRange(1, 3) inserted at 5
    assert rotate_forward(iter(range(7)), 1, 4, 5) == [0, 4, 5, 1, 2, 3, 6]


def test_on_the_whole_input() -> None:
    expected = [*range(10, 21), *range(10)]
    assert rotate_forward(iter(range(21)), 0, 10, 20) == expected


def test_accepts_any_iterable() -> None:
    assert rotate_forward("abcdef", 2, 3, 4) == ["a", "b", "d", "e", "c", "f"]


def test_middle_off_the_end_returns_what_is_there() -> None:
    assert rotate_forward(iter(range(7)), 5, 9, 12) == list(range(7))
    assert rotate_forward(iter(range(7)), 9, 10, 12) == list(range(7))


def test_last_off_the_end_truncates_the_moved_block() -> None:
    assert rotate_forward(iter(range(7)), 5, 6, 9) == [0, 1, 2, 3, 4, 6, 5]
    assert rotate_forward(iter(range(11)), 4, 8, 15) == [
        0, 1, 2, 3, 8, 9, 10, 4, 5, 6, 7,
    ]


def test_on_an_empty_input() -> None:
    assert rotate_forward(iter([]), 0, 1, 1) == []


def test_streams_the_head_and_tail() -> None:
    # Only as much of the input as needed is consumed
    rotated = iter_forward(count(), 1, 5, 5)
    assert list(islice(rotated, 10)) == [0, 5, 1, 2, 3, 4, 6, 7, 8, 9]


def test_consumes_the_input_once() -> None:
    consumed: list[int] = []

    def numbers():
        for i in range(7):
            consumed.append(i)
            yield i

    assert rotate_forward(numbers(), 2, 4, 6) == [0, 1, 4, 5, 6, 2, 3]
    assert consumed == list(range(7))
