"""Point and domain primitives shared by the grid and the sampler.

Points are immutable ``(x, y)`` tuples; downstream code that wants array
semantics converts a whole point sequence at once with :func:`as_array`.
"""
from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from .constants import COORD_DTYPE

__all__ = [
    'Point', 'Domain', 'narrow', 'as_array',
]


class Point(NamedTuple):
    x: float
    y: float


def narrow(value) -> float:
    """Round a real value to the sampler's coordinate precision (float32).

    The result is returned as a Python float so arithmetic stays cheap; it is
    exactly representable in single precision.
    """
    return float(COORD_DTYPE(value))


class Domain(NamedTuple):
    """Half-open sampling rectangle ``[xmin, xmax) x [ymin, ymax)``."""
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

    def contains(self, p) -> bool:
        x, y = p[0], p[1]
        return self.xmin <= x < self.xmax and self.ymin <= y < self.ymax


def as_array(points: Iterable[Sequence[float]], dtype=COORD_DTYPE) -> np.ndarray:
    """Convert a point sequence to an ``(N, 2)`` array (float32 by default).

    An empty input yields an array of shape ``(0, 2)``.
    """
    arr = np.asarray(list(points), dtype=dtype)
    if arr.size == 0:
        return np.empty((0, 2), dtype=dtype)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {arr.shape}")
    return arr
