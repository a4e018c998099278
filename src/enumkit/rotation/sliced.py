"""Rotation for random access inputs, by slicing."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def rotate_sliced(xs: Sequence[T] | Any, start: int, middle: int, last: int) -> list[T]:
    """Rotate a sliceable `xs` by cutting it in four and gluing it back.

    This has the semantics of C++'s `std::rotate`, the range `[start, last]`
    is reordered such that the element at `middle` becomes its first
    and the element at `middle - 1` its last.

    Args:
        xs: A list, tuple, `numpy.ndarray` or anything else supporting
            slicing with `[a:b]`.
        start: Where the moved block will be inserted.
        middle: The first index of the moved block.
        last: The last index of the moved block, inclusive.

    Returns:
        A new list in rotated order.
    """
    head = xs[:start]
    back = xs[start:middle]
    front = xs[middle : last + 1]
    tail = xs[last + 1 :]
    return [*head, *front, *back, *tail]
