from __future__ import annotations

from enumkit.rotation.api import rotate, rotate_one, slide, slide_one, traversal_of
from enumkit.rotation.generic import rotate_generic
from enumkit.rotation.linear import rotate_forward
from enumkit.rotation.sliced import rotate_sliced

__all__ = [
    "rotate",
    "rotate_one",
    "slide",
    "slide_one",
    "traversal_of",
    "rotate_forward",
    "rotate_generic",
    "rotate_sliced",
]
