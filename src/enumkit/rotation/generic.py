"""Rotation for any iterable, including sets and mappings."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def rotate_generic(xs: Iterable[T], start: int, middle: int, last: int) -> list[T]:
    """Rotate `xs` by sorting every element into one of two lists.

    Each element is placed by its position in the traversal into one of
    four chunks, `head`, `back`, `front` and `tail`. The `head` and `front`
    go into `pre`, `back` and `tail` into `post`, and `pre + post` is the
    rotated order.

    !!! warning "Unordered collections"

        The positions are those of the order `xs` is iterated in. For a `set`
        this order is an implementation detail, the rotation is only
        meaningful relative to it.

    ```python exec="true" source="material-block" result="python" title="rotate_generic"
    from enumkit.rotation.generic import rotate_generic

    print(rotate_generic({"a": 1, "b": 2, "c": 3}.items(), 0, 2, 2))
    # [('c', 3), ('a', 1), ('b', 2)]
    ```

    Args:
        xs: The iterable to rotate.
        start: Where the moved block will be inserted.
        middle: The first index of the moved block.
        last: The last index of the moved block, inclusive.

    Returns:
        A new list in rotated order.
    """  # noqa: E501
    pre: list[T] = []
    post: list[T] = []
    for i, x in enumerate(xs):
        if i < start or middle <= i <= last:
            pre.append(x)
        else:
            post.append(x)

    pre.extend(post)
    return pre
