"""A collection of small functional tools for iterables.

This module contains the helpers that `rotate` builds on, as well as a few
algorithms missing from the builtins.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sized
from typing import Any, TypeVar

from more_itertools import ilen

T = TypeVar("T")


def drop(xs: Iterable[T], value: Any) -> list[T]:
    """Filter out every element equal to `value`.

    ```python exec="true" source="material-block" result="python" title="drop"
    from enumkit import drop

    print(drop([1, 2, 1, 3, 1, 4, 1, 5], 1))
    # [2, 3, 4, 5]

    print(drop([1, None, 1, 3, None, None, 1, 5], None))
    # [1, 1, 3, 1, 5]
    ```

    Args:
        xs: The iterable to filter.
        value: The value to reject.

    Returns:
        A list of the remaining elements, in order.
    """
    return [x for x in xs if x != value]


def none(xs: Iterable[T], pred: Callable[[T], Any]) -> bool:
    """The opposite of `any()`, true if `pred` holds for no element.

    ```python exec="true" source="material-block" result="python" title="none"
    from enumkit import none

    print(none([1, 2, 3, 4, 5], lambda x: x % 2 == 0))
    # False

    print(none([1, 3, 5, 7, 9], lambda x: x % 2 == 0))
    # True
    ```

    Args:
        xs: The iterable to check.
        pred: The predicate to test each element with.

    Returns:
        Whether no element satisfies the predicate.
    """
    return not any(pred(x) for x in xs)


def as_items(xs: Iterable[T]) -> Iterable[Any]:
    """View an iterable the way it is rotated.

    Mappings are traversed as their `(key, value)` pairs, everything
    else is returned as is.
    """
    if isinstance(xs, Mapping):
        return xs.items()
    return xs


def count_items(xs: Iterable[Any]) -> int:
    """Count the elements of an iterable.

    Uses `len()` where available, otherwise walks a full traversal of `xs`.
    Only use this on re-iterable inputs, an iterator is exhausted by it.
    """
    if isinstance(xs, Sized):
        return len(xs)
    return ilen(xs)


def is_one_shot(xs: Iterable[Any]) -> bool:
    """Whether `xs` is an iterator, which can only be traversed once."""
    return isinstance(xs, Iterator)
