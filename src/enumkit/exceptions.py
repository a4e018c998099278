"""The exceptions and warnings raised by enumkit."""
from __future__ import annotations

from typing import Any


class RotateError(ValueError):
    """Base class for errors raised when a rotation is impossible."""


class InvalidStepError(RotateError):
    """Raised when a range has a step other than `1` or `-1`."""

    def __init__(self, index_range: Any, step: int, *args: Any) -> None:
        """Initialize the exception.

        Args:
            index_range: The offending range, as given by the caller.
            step: The step of that range.
            *args: Additional arguments to pass to the exception.
        """
        self.step = step
        super().__init__(
            f"Can only rotate ranges with a step of 1 or -1, got {index_range}"
            f" with step {step}.",
            *args,
        )


class MoveBlockedError(RotateError):
    """Raised when the insertion point lies inside the range being moved."""

    def __init__(self, first: int, last: int, insertion_point: int, *args: Any) -> None:
        """Initialize the exception.

        Args:
            first: The first index of the range being moved.
            last: The last index of the range being moved.
            insertion_point: The insertion point which was asked for.
            *args: Additional arguments to pass to the exception.
        """
        self.first = first
        self.last = last
        self.insertion_point = insertion_point
        super().__init__(
            "Insertion point for rotate must be outside the range being moved"
            f" (tried to insert {first}..{last} at {insertion_point}).",
            *args,
        )


class UnorderedRotationWarning(UserWarning):
    """A warning raised when rotating a collection with no guaranteed order.

    The rotation is relative to whatever order one full traversal of the
    collection yields, which for a `set` is an implementation detail and
    not the order the elements were added in, nor their sorted order.
    """
