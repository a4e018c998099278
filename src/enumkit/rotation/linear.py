"""Rotation for inputs that can only be traversed forward, once.

The input is split into four chunks by index, which are emitted as
`head, front, back, tail`:

* `head`: `[0, start)`, streamed through untouched.
* `back`: `[start, middle)`, buffered.
* `front`: `[middle, last]`, buffered.
* `tail`: `(last, ...)`, streamed through after the rotated block.

Only `back` and `front` are ever held in memory and the input is walked
exactly once, so this works on generators, file handles and any other
iterator.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


def iter_forward(xs: Iterable[T], start: int, middle: int, last: int) -> Iterator[T]:
    """Lazily yield `xs` with `[middle, last]` moved in front of `start`.

    If `xs` runs out before `middle` is reached, whatever could be read is
    yielded in its original order. If it runs out before `last`, the moved
    block is just shorter than asked for.

    Args:
        xs: The iterable to rotate.
        start: Where the moved block will be inserted.
        middle: The first index of the moved block.
        last: The last index of the moved block, inclusive.

    Yields:
        The elements of `xs` in rotated order.
    """
    itr = iter(xs)
    yield from islice(itr, start)

    n_back = middle - start
    back = list(islice(itr, n_back))
    if len(back) < n_back:
        yield from back
        return

    front = list(islice(itr, last - middle + 1))
    yield from front
    yield from back
    yield from itr


def rotate_forward(xs: Iterable[T], start: int, middle: int, last: int) -> list[T]:
    """Rotate `xs` in a single forward pass.

    ```python exec="true" source="material-block" result="python" title="rotate_forward"
    from enumkit.rotation.linear import rotate_forward

    print(rotate_forward(iter(range(7)), 1, 5, 5))
    # [0, 5, 1, 2, 3, 4, 6]
    ```

    Args:
        xs: The iterable to rotate.
        start: Where the moved block will be inserted.
        middle: The first index of the moved block.
        last: The last index of the moved block, inclusive.

    Returns:
        A new list in rotated order.
    """  # noqa: E501
    return list(iter_forward(xs, start, middle, last))
