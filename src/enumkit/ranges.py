"""Normalizing and validating the ranges given to `rotate`.

Ranges are normalized the same way slicing a list is:

* Negative indices count from the end, `-1` being the last element.
* A `last` past the end is truncated to the last element.
* A `first` past the end, or a decreasing range, selects nothing.
* Only steps of `1` and `-1` make sense for a contiguous block, a `-1`
  step range selects the same elements as its ascending counterpart.

Both functions here return a [`Result`][result.Result] rather than raising,
it's up to the caller to decide what to do with an `Err`.
"""
from __future__ import annotations

from result import Err, Ok, Result

from enumkit.exceptions import InvalidStepError, MoveBlockedError
from enumkit.types import EMPTY, IndexRange, NormalizedRange, RangeLike

VALID_STEPS = (1, -1)


def resolve_index(index: int, length: int) -> int:
    """Resolve a possibly negative index against a length."""
    return index + length if index < 0 else index


def resolve_insertion_point(insertion_point: int, length: int | None) -> int:
    """Resolve an insertion point the way `list.insert()` does.

    Negative insertion points count from the end and anything before the
    start of the collection is clamped to `0`.

    Args:
        insertion_point: The insertion point given by the caller.
        length: The length of the collection, only required if
            `insertion_point` is negative.

    Returns:
        The resolved, non-negative insertion point.
    """
    if insertion_point >= 0:
        return insertion_point

    if length is None:
        raise ValueError(f"Can't resolve {insertion_point=} without a length.")

    return max(0, insertion_point + length)


def normalize(
    length: int | None,
    first: int,
    last: int,
    step: int = 1,
) -> Result[NormalizedRange, InvalidStepError]:
    """Normalize an inclusive range against the length of a collection.

    ```python
    normalize(7, -4, -2)  # Ok(IndexRange(first=3, last=5, step=1))
    normalize(11, 8, 15)  # Ok(IndexRange(first=8, last=10, step=1))
    normalize(7, 5, 0)  # Ok(EMPTY)
    normalize(7, 2, 10, 2)  # Err(InvalidStepError(...))
    ```

    Args:
        length: The length of the collection. If `None`, the length is not
            known and neither `first` nor `last` may be negative. The range
            is then only checked for its step and direction, truncation is
            left up to the rotation itself.
        first: The first index of the range.
        last: The last index of the range, inclusive.
        step: The step of the range.

    Returns:
        An ascending range with `step == 1` that only holds valid indices,
        [`EMPTY`][enumkit.types.EMPTY] if nothing is selected or an
        [`InvalidStepError`][enumkit.exceptions.InvalidStepError].
    """
    if step not in VALID_STEPS:
        return Err(InvalidStepError(IndexRange(first, last, step), step))

    if step == -1:
        first, last = last, first

    if length is not None:
        first = resolve_index(first, length)
        last = resolve_index(last, length)

        if first < 0 or first >= length:
            return Ok(EMPTY)

        last = min(last, length - 1)

    elif first < 0 or last < 0:
        raise ValueError(f"Can't resolve negative {first=} or {last=} without a length")

    if first > last:
        return Ok(EMPTY)

    return Ok(IndexRange(first, last))


def normalize_slice(
    s: slice | range,
    length: int,
) -> Result[NormalizedRange, InvalidStepError]:
    """Normalize a `slice` or `range`, with their exclusive `stop`.

    ```python
    normalize_slice(slice(1, 4), 7)  # Ok(IndexRange(first=1, last=3, step=1))
    normalize_slice(slice(-3, None), 7)  # Ok(IndexRange(first=4, last=6, step=1))
    normalize_slice(slice(5, 1, -1), 7)  # Ok(IndexRange(first=2, last=5, step=1))
    ```

    Args:
        s: The slice or range to normalize.
        length: The length of the collection.

    Returns:
        The inclusive range of the indices `s` selects, or
        [`EMPTY`][enumkit.types.EMPTY] if it selects none.
    """
    step = 1 if s.step is None else s.step
    if step not in VALID_STEPS:
        return Err(InvalidStepError(s, step))

    selected = range(*slice(s.start, s.stop, step).indices(length))
    if not selected:
        return Ok(EMPTY)

    first, last = sorted((selected[0], selected[-1]))
    return Ok(IndexRange(first, last))


def normalize_range(
    range_like: RangeLike,
    length: int | None,
) -> Result[NormalizedRange, InvalidStepError]:
    """Normalize any of the accepted range forms.

    Args:
        range_like: A single index, an [`IndexRange`][enumkit.types.IndexRange],
            a `slice` or a `range`.
        length: The length of the collection if known. Required for
            negative indices, slices and ranges.

    Returns:
        The normalized range.
    """
    match range_like:
        case bool():
            raise TypeError(f"Can't use {range_like=} as an index.")
        case int():
            return normalize(length, range_like, range_like)
        case IndexRange(first=first, last=last, step=step):
            return normalize(length, first, last, step)
        case slice() | range():
            if range_like.step not in (None, *VALID_STEPS):
                return Err(InvalidStepError(range_like, range_like.step))
            if length is None:
                raise ValueError(f"Can't normalize {range_like=} without a length.")
            return normalize_slice(range_like, length)

    raise TypeError(
        f"Expected an int, IndexRange, slice or range, got {range_like=}"
        f" of type {type(range_like)}.",
    )


def requires_length(range_like: RangeLike, insertion_point: int) -> bool:
    """Whether the length of the collection is needed to normalize a rotation."""
    match range_like:
        case int():
            return range_like < 0 or insertion_point < 0
        case IndexRange(first=first, last=last):
            return first < 0 or last < 0 or insertion_point < 0
        case slice() | range():
            return range_like.step in (None, *VALID_STEPS)

    return insertion_point < 0


def validate(
    index_range: IndexRange,
    insertion_point: int,
) -> Result[IndexRange, MoveBlockedError]:
    """Check that `index_range` can be moved in front of `insertion_point`.

    The insertion point may be anywhere outside the range, or equal to its
    `first` index, which leaves the collection unchanged.

    Args:
        index_range: A normalized range.
        insertion_point: A resolved insertion point.

    Returns:
        The range, or a [`MoveBlockedError`][enumkit.exceptions.MoveBlockedError]
        if the insertion point lies within the range.
    """
    if index_range.first < insertion_point <= index_range.last:
        return Err(
            MoveBlockedError(index_range.first, index_range.last, insertion_point),
        )

    return Ok(index_range)
