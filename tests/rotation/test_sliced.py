from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pytest_cases import parametrize

from enumkit.rotation.sliced import rotate_sliced


@parametrize(
    "xs",
    [list(range(7)), tuple(range(7)), range(7), np.arange(7)],
    idgen=lambda xs: xs.__class__.__name__,
)
def test_rotates_any_sliceable(xs: Sequence[int]) -> None:
    assert rotate_sliced(xs, 1, 3, 5) == [0, 3, 4, 5, 1, 2, 6]
    assert rotate_sliced(xs, 1, 4, 5) == [0, 4, 5, 1, 2, 3, 6]


def test_returns_a_list_of_characters_for_strings() -> None:
    assert rotate_sliced("abcdef", 2, 3, 3) == ["a", "b", "d", "c", "e", "f"]


def test_rotates_rows_of_an_array() -> None:
    xs = np.arange(6).reshape(3, 2)
    rotated = rotate_sliced(xs, 0, 2, 2)
    np.testing.assert_array_equal(np.stack(rotated), [[4, 5], [0, 1], [2, 3]])


def test_out_of_range_indices_leave_input_as_is() -> None:
    xs = list(range(7))
    assert rotate_sliced(xs, 9, 10, 12) == xs
    assert rotate_sliced(xs, 5, 9, 12) == xs
    assert rotate_sliced(xs, 5, 6, 9) == [0, 1, 2, 3, 4, 6, 5]
