"""Algorithms for iterables missing from the builtins, chiefly `rotate`."""
from __future__ import annotations

from enumkit._functional import drop, none
from enumkit.exceptions import (
    InvalidStepError,
    MoveBlockedError,
    RotateError,
    UnorderedRotationWarning,
)
from enumkit.rotation import rotate, rotate_one, slide, slide_one
from enumkit.types import EMPTY, IndexRange, Traversal

__all__ = [
    "rotate",
    "rotate_one",
    "slide",
    "slide_one",
    "drop",
    "none",
    "IndexRange",
    "Traversal",
    "EMPTY",
    "RotateError",
    "InvalidStepError",
    "MoveBlockedError",
    "UnorderedRotationWarning",
]
