"""Stores low-level types used through the library."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal, TypeAlias

from attrs import frozen

if TYPE_CHECKING:
    from typing_extensions import Self


@frozen
class IndexRange:
    """An inclusive range of indices, `first` and `last` both included.

    Unlike the builtin `range`, both endpoints are part of the selection
    and either of them may be negative, in which case it is counted from the
    end of the collection once its length is known.

    ```python
    IndexRange(1, 3)  # selects indices 1, 2, 3
    IndexRange(-3, -1)  # selects the last three elements
    IndexRange.single(4)  # selects only index 4
    ```

    Attributes:
        first: The first index of the range.
        last: The last index of the range.
        step: The direction of the range. Only `1` and `-1` are accepted
            by [`normalize()`][enumkit.ranges.normalize], where a `-1`
            range is turned into the ascending range over the same elements.
    """

    first: int
    last: int
    step: int = 1

    @classmethod
    def single(cls, index: int) -> Self:
        """Create a range selecting exactly one index."""
        return cls(index, index)

    def __str__(self) -> str:
        if self.step == 1:
            return f"{self.first}..{self.last}"
        return f"{self.first}..{self.last}//{self.step}"


class EmptySelection:
    """Marker for a range that selects no element at all."""

    _instance: EmptySelection | None = None

    def __new__(cls) -> EmptySelection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptySelection()
"""The only instance of [`EmptySelection`][enumkit.types.EmptySelection]."""


class Traversal(str, Enum):
    """How an input can be traversed, used to pick a rotation strategy."""

    FORWARD_ONLY = "forward_only"
    """Can be visited exactly once, in order, e.g. an iterator or generator."""

    RANDOM_ACCESS = "random_access"
    """Supports `len()` and slicing, e.g. a `list`, `tuple` or `numpy.ndarray`."""

    GENERIC = "generic"
    """Anything else that can be iterated, e.g. a `set` or a `dict`."""

    def __str__(self) -> str:
        return self.value


RangeLike: TypeAlias = int | IndexRange | slice | range
"""Everything accepted as the range to move."""

NormalizedRange: TypeAlias = IndexRange | EmptySelection
"""The outcome of normalizing a range against a length."""

Strategy: TypeAlias = Literal["auto", "linear", "generic", "sliced"]
"""The rotation strategy to use, `"auto"` dispatches on the input."""

