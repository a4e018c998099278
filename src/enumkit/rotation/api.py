"""The public rotate functions.

A rotation pulls out a single element, or a contiguous range of elements,
and inserts it in front of the element previously at the insertion point.

```python exec="true" source="material-block" result="python" title="rotate"
from enumkit import IndexRange, rotate

xs = [0, 1, 2, 3, 4, 5, 6]

# Rotate a single element
print(rotate(xs, 5, 1))  # [0, 5, 1, 2, 3, 4, 6]

# Rotate a range of elements backward, or forward
print(rotate(xs, IndexRange(3, 5), 1))  # [0, 3, 4, 5, 1, 2, 6]
print(rotate(xs, IndexRange(1, 3), 5))  # [0, 4, 5, 1, 2, 3, 6]

# Negative indices count from the end, slices work as they do on a list
print(rotate(xs, IndexRange(-4, -2), 1))  # [0, 3, 4, 5, 1, 2, 6]
print(rotate(xs, slice(3, None), 2))  # [0, 1, 3, 4, 5, 6, 2]
```

Which algorithm does the work depends on how the input can be traversed,
see [`traversal_of()`][enumkit.rotation.api.traversal_of]. Whichever is
used, the result is always a new `list`.
"""
from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable, Sequence, Set
from typing import Any, TypeVar

import numpy as np
from more_itertools import ilen, seekable

from enumkit._functional import as_items, count_items, is_one_shot
from enumkit.exceptions import UnorderedRotationWarning
from enumkit.ranges import (
    normalize_range,
    requires_length,
    resolve_insertion_point,
    validate,
)
from enumkit.rotation.generic import rotate_generic
from enumkit.rotation.linear import rotate_forward
from enumkit.rotation.sliced import rotate_sliced
from enumkit.types import (
    EMPTY,
    IndexRange,
    NormalizedRange,
    RangeLike,
    Strategy,
    Traversal,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

Rotator = Callable[[Any, int, int, int], list]

ROTATORS: dict[str, Rotator] = {
    "linear": rotate_forward,
    "generic": rotate_generic,
    "sliced": rotate_sliced,
}

DEFAULT_STRATEGIES: dict[Traversal, Strategy] = {
    Traversal.FORWARD_ONLY: "linear",
    Traversal.RANDOM_ACCESS: "sliced",
    Traversal.GENERIC: "generic",
}


def traversal_of(xs: Iterable[Any]) -> Traversal:
    """Get how `xs` can be traversed.

    * Iterators, including generators, are
        [`FORWARD_ONLY`][enumkit.types.Traversal.FORWARD_ONLY].
    * Sequences and `numpy.ndarray` are
        [`RANDOM_ACCESS`][enumkit.types.Traversal.RANDOM_ACCESS].
    * Every other iterable, e.g. a `set` or a `dict`, is
        [`GENERIC`][enumkit.types.Traversal.GENERIC].

    Args:
        xs: The object to check.

    Returns:
        The kind of traversal.
    """
    if is_one_shot(xs):
        return Traversal.FORWARD_ONLY
    if isinstance(xs, Sequence | np.ndarray):
        return Traversal.RANDOM_ACCESS
    if isinstance(xs, Iterable):
        return Traversal.GENERIC

    raise TypeError(f"Can't rotate {xs=} of type {type(xs)}, it is not iterable.")


def _measure(xs: Iterable[T]) -> tuple[Iterable[T], int]:
    # One-shot iterators are buffered so they can be walked a second time
    if is_one_shot(xs):
        buffered = seekable(xs)
        length = ilen(buffered)
        buffered.seek(0)
        return buffered, length

    return xs, count_items(xs)


def _normalize(range_or_index: RangeLike, length: int | None) -> NormalizedRange:
    normalized = normalize_range(range_or_index, length)
    if normalized.is_err():
        raise normalized.unwrap_err()

    return normalized.unwrap()


def _select_rotator(
    xs: Iterable[T],
    kind: Traversal,
    strategy: Strategy,
) -> tuple[Rotator, Iterable[T]]:
    if strategy == "auto":
        strategy = DEFAULT_STRATEGIES[kind]

    # Slicing needs something sliceable, everything else is materialized
    if strategy == "sliced" and kind is not Traversal.RANDOM_ACCESS:
        xs = list(xs)

    return ROTATORS[strategy], xs


def rotate(
    xs: Iterable[T],
    range_or_index: RangeLike,
    insertion_point: int,
    *,
    strategy: Strategy = "auto",
) -> list[T]:
    """Move a single element or a contiguous range in front of `insertion_point`.

    The range is normalized like a slice of a list:

    * Negative indices count from the end, `-1` being the last element.
        This requires the length of `xs`, for an iterator this means it is
        buffered and traversed twice.
    * If the range's `last` is out of bounds, it is truncated to the last
        element.
    * If the range's `first` is out of bounds, or the range is decreasing
        (e.g. `IndexRange(5, 0)`), nothing is selected and you get back the
        input as a list.
    * Ranges with a step other than `1` or `-1` raise an
        [`InvalidStepError`][enumkit.exceptions.InvalidStepError].

    Moving a range to its own `first` index leaves `xs` unchanged, moving it
    anywhere else inside itself raises a
    [`MoveBlockedError`][enumkit.exceptions.MoveBlockedError].

    !!! warning "Unordered collections"

        Mappings are rotated as their `(key, value)` pairs and every
        collection in the order it iterates in. For a `set` this order is not
        guaranteed and an
        [`UnorderedRotationWarning`][enumkit.exceptions.UnorderedRotationWarning]
        is emitted.

    Args:
        xs: The finite iterable to rotate.
        range_or_index: The index, or range of indices, to move. One of
            an `int`, an inclusive [`IndexRange`][enumkit.types.IndexRange],
            or a `slice`/`range` with their usual exclusive `stop`.
        insertion_point: The index, in terms of the original `xs`, in front of
            which the range is inserted. Negative values are resolved like
            `list.insert()` does.
        strategy: The algorithm to use, by default `"auto"`.

            * `"auto"` picks one based on
                [`traversal_of(xs)`][enumkit.rotation.api.traversal_of].
            * `"linear"` walks `xs` once, forward.
            * `"generic"` sorts each element into one of two lists.
            * `"sliced"` slices `xs`, materializing it first if needed.

    Returns:
        A new list in rotated order.
    """
    if strategy != "auto" and strategy not in ROTATORS:
        raise ValueError(
            f"Unknown {strategy=}, expected one of {['auto', *ROTATORS]}.",
        )

    kind = traversal_of(xs)
    if isinstance(xs, Set):
        warnings.warn(
            f"Rotating a {type(xs).__name__} which has no guaranteed order,"
            " the result is relative to the order it iterates in.",
            UnorderedRotationWarning,
            stacklevel=2,
        )

    items = as_items(xs)
    length: int | None = None
    if requires_length(range_or_index, insertion_point):
        items, length = _measure(items)
    elif kind is not Traversal.FORWARD_ONLY:
        length = count_items(items)

    selection = _normalize(range_or_index, length)
    if (
        length is None
        and isinstance(selection, IndexRange)
        and selection.first < insertion_point <= selection.last
    ):
        # Only the true length tells a truncated range from a blocked move
        items, length = _measure(items)
        selection = _normalize(range_or_index, length)

    if selection is EMPTY:
        logger.debug(f"{range_or_index} selects nothing, returning input unchanged")
        return list(items)

    assert isinstance(selection, IndexRange)
    insertion_point = resolve_insertion_point(insertion_point, length)
    if insertion_point == selection.first:
        logger.debug(f"Inserting {selection} at its own start, nothing to do")
        return list(items)

    validated = validate(selection, insertion_point)
    if validated.is_err():
        raise validated.unwrap_err()

    first, last = selection.first, selection.last
    if insertion_point < first:
        start, middle, end = insertion_point, first, last
    else:
        start, middle, end = first, last + 1, insertion_point

    rotator, items = _select_rotator(items, kind, strategy)
    logger.debug(
        f"Rotating {kind} input with {rotator.__name__}"
        f" ({start=}, {middle=}, last={end})",
    )
    return rotator(items, start, middle, end)


def rotate_one(
    xs: Iterable[T],
    index: int,
    insertion_point: int,
    *,
    strategy: Strategy = "auto",
) -> list[T]:
    """Move the single element at `index` in front of `insertion_point`.

    ```python exec="true" source="material-block" result="python" title="rotate_one"
    from enumkit import rotate_one

    print(rotate_one([0, 1, 2, 3, 4, 5, 6], 5, 1))  # [0, 5, 1, 2, 3, 4, 6]
    print(rotate_one([0, 1, 2, 3, 4, 5, 6], 2, 4))  # [0, 1, 3, 4, 2, 5, 6]
    ```

    See [`rotate()`][enumkit.rotation.api.rotate] for the details.
    """  # noqa: E501
    return rotate(xs, IndexRange.single(index), insertion_point, strategy=strategy)


def slide(
    xs: Iterable[T],
    range_start: int,
    range_end: int,
    insertion_point: int,
    *,
    strategy: Strategy = "auto",
) -> list[T]:
    """Slide the elements `[range_start, range_end]` to `insertion_point`.

    ```python exec="true" source="material-block" result="python" title="slide"
    from enumkit import slide

    print(slide([0, 1, 2, 3, 4, 5, 6], 3, 5, 1))  # [0, 3, 4, 5, 1, 2, 6]
    print(slide([0, 1, 2, 3, 4, 5, 6], 1, 3, 5))  # [0, 4, 5, 1, 2, 3, 6]
    ```

    Args:
        xs: The finite iterable to rotate.
        range_start: The first index to move.
        range_end: The last index to move, inclusive.
        insertion_point: The index in front of which the range is inserted.
        strategy: The algorithm to use, see [`rotate()`][enumkit.rotation.api.rotate].

    Returns:
        A new list in rotated order.
    """
    return rotate(
        xs,
        IndexRange(range_start, range_end),
        insertion_point,
        strategy=strategy,
    )


def slide_one(
    xs: Iterable[T],
    index: int,
    insertion_point: int,
    *,
    strategy: Strategy = "auto",
) -> list[T]:
    """Slide the single element at `index` to `insertion_point`."""
    return slide(xs, index, index, insertion_point, strategy=strategy)
