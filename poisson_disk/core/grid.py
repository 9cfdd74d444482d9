"""Uniform background grid for Poisson-disk neighbor queries.

With a cell size of ``min_dist / sqrt(2)`` any two points closer than
``min_dist`` lie in the same or a nearby cell, so a proximity query only
visits the cells overlapping a ``2 * min_dist`` square around the query
point. Cells are stored row-major in a flat list (``gy * width + gx``).
"""
from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from .constants import SQRT2
from .geometry import Domain, Point

__all__ = ['SpatialGrid']


class SpatialGrid:
    """Insert-only bucket grid over a rectangular domain.

    Grid dimensions are ``ceil(width / cell_size) x ceil(height / cell_size)``
    clamped to at least one cell per axis, so degenerate (zero or negative
    extent) domains still get a valid grid.
    """

    def __init__(self, domain: Domain, cell_size: float):
        if not cell_size > 0 or not math.isfinite(cell_size):
            raise ValueError(f"cell_size must be positive and finite, got {cell_size!r}")
        self.domain = domain
        self.cell_size = float(cell_size)
        self.width = max(1, math.ceil(domain.width / self.cell_size))
        self.height = max(1, math.ceil(domain.height / self.cell_size))
        self.cells: List[List[Point]] = [[] for _ in range(self.width * self.height)]
        self._count = 0

    @classmethod
    def for_min_dist(cls, domain: Domain, min_dist: float) -> 'SpatialGrid':
        return cls(domain, min_dist / SQRT2)

    def _clamp_x(self, gx: int) -> int:
        return min(max(gx, 0), self.width - 1)

    def _clamp_y(self, gy: int) -> int:
        return min(max(gy, 0), self.height - 1)

    def cell_of(self, p) -> Tuple[int, int]:
        """Grid coordinates ``(gx, gy)`` of the cell holding ``p``."""
        gx = math.floor((p[0] - self.domain.xmin) / self.cell_size)
        gy = math.floor((p[1] - self.domain.ymin) / self.cell_size)
        return self._clamp_x(gx), self._clamp_y(gy)

    def insert(self, p: Point) -> None:
        gx, gy = self.cell_of(p)
        self.cells[gy * self.width + gx].append(p)
        self._count += 1

    def has_neighbor_within(self, p, min_dist: float, min_dist_squared: float) -> bool:
        """True if a stored point lies at squared distance ``<= min_dist_squared`` from ``p``."""
        dom = self.domain
        cs = self.cell_size
        min_x = self._clamp_x(math.floor((p[0] - min_dist - dom.xmin) / cs))
        max_x = self._clamp_x(math.ceil((p[0] + min_dist - dom.xmin) / cs))
        min_y = self._clamp_y(math.floor((p[1] - min_dist - dom.ymin) / cs))
        max_y = self._clamp_y(math.ceil((p[1] + min_dist - dom.ymin) / cs))

        px, py = p[0], p[1]
        cells = self.cells
        w = self.width
        for gy in range(min_y, max_y + 1):
            row = gy * w
            for gx in range(min_x, max_x + 1):
                for t in cells[row + gx]:
                    dx = px - t[0]
                    dy = py - t[1]
                    if dx * dx + dy * dy <= min_dist_squared:
                        return True
        return False

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        for cell in self.cells:
            yield from cell

    def __repr__(self) -> str:
        return (f"SpatialGrid({self.width}x{self.height}, cell_size={self.cell_size:.6g}, "
                f"points={self._count})")
