"""Poisson-disk point sampling over a rectangle (Bridson's algorithm).

Poisson-disk sampling produces points that are tightly packed but no closer
to each other than a given minimum distance, which looks more natural than
uniform random scatter for stippling, object placement and mesh seeding.

Implementation of R. Bridson, "Fast Poisson Disk Sampling in Arbitrary
Dimensions", SIGGRAPH 2007 sketches, restricted to 2D.

Example
-------
    >>> from poisson_disk import PoissonSampler
    >>> pts = PoissonSampler(seed=42).generate(0, 0, 100, 100, 5.0)
    >>> len(pts) > 0
    True
"""
from __future__ import annotations

import math
import time
from typing import List, Optional

import numpy as np

from .config import SamplerConfig
from .constants import COORD_DTYPE, DEFAULT_REJECTION_LIMIT, TWO_PI
from .geometry import Domain, Point, narrow
from .grid import SpatialGrid
from .logging_utils import get_logger
from .random_stream import RandomStream
from .stats import SamplerStats

logger = get_logger('poisson_disk.sampler')

__all__ = ['PoissonSampler', 'poisson_disk_points']


def _below(value: float, lo: float, hi: float) -> float:
    """Keep a narrowed draw off the open upper bound of ``[lo, hi)``."""
    if value < hi or not hi > lo:
        return value
    return float(np.nextafter(COORD_DTYPE(hi), COORD_DTYPE(-np.inf)))


class PoissonSampler:
    """Reusable Poisson-disk sampler owning one random stream.

    Grid, active list and accepted list are rebuilt on every
    :meth:`generate` call; only the random stream carries over, so two
    successive runs on one instance differ while two instances built with
    the same seed reproduce each other draw for draw.
    """

    def __init__(self, seed: Optional[int] = None, *, stream: Optional[RandomStream] = None):
        self.random = stream if stream is not None else RandomStream(seed)
        self.domain: Optional[Domain] = None
        self.grid: Optional[SpatialGrid] = None
        self._points: List[Point] = []
        self.stats = SamplerStats()

    @property
    def points(self) -> List[Point]:
        """Accepted points of the most recent run."""
        return self._points

    def _random_point_around(self, p: Point, r_min: float, r_max: float) -> Point:
        a = narrow(self.random.uniform(0.0, TWO_PI))
        r = narrow(self.random.uniform(r_min, r_max))
        return Point(narrow(p.x + r * math.cos(a)), narrow(p.y + r * math.sin(a)))

    def generate(self, xmin: float, ymin: float, xmax: float, ymax: float,
                 min_dist: float, rejection_limit: int = DEFAULT_REJECTION_LIMIT) -> List[Point]:
        """Generate a Poisson-disk point set inside ``[xmin, xmax) x [ymin, ymax)``.

        Parameters
        ----------
        xmin, ymin, xmax, ymax : float
            Sampling rectangle (upper bounds exclusive).
        min_dist : float
            Minimum distance between points. A pair at exactly ``min_dist``
            counts as too close, so returned points are strictly farther apart.
        rejection_limit : int
            Candidates tried around each picked active point. Around 6 is
            usually enough; 30 gives denser packings.

        Returns
        -------
        list of Point
            Accepted points in acceptance order, seed point first. The list is
            a copy; later runs do not modify it.

        Raises
        ------
        ValueError
            If ``min_dist`` is not a positive finite number, or a bound is not
            finite once narrowed to single precision.

        Notes
        -----
        Non-positive extents or ``rejection_limit < 1`` are not rejected:
        the result is then the seed point alone.
        """
        if min_dist > 0 and math.isfinite(min_dist):
            min_dist = narrow(min_dist)
        # also catches values that vanish or overflow in single precision
        if not (min_dist > 0 and math.isfinite(min_dist)):
            raise ValueError(f"min_dist must be positive and finite, got {min_dist!r}")
        dom = Domain(narrow(xmin), narrow(ymin), narrow(xmax), narrow(ymax))
        if not all(math.isfinite(v) for v in dom):
            # NaN bounds, or bounds that overflow single precision, leave no usable grid
            raise ValueError("domain bounds must be finite in single precision, "
                             f"got {(xmin, ymin, xmax, ymax)!r}")
        min_dist_sq = min_dist * min_dist
        max_dist = narrow(2.0 * min_dist)

        t0 = time.perf_counter()
        self.domain = dom
        self.grid = grid = SpatialGrid.for_min_dist(dom, min_dist)
        self._points = points = []
        stats = self.stats = SamplerStats()
        logger.debug('generate: domain=%s min_dist=%g k=%d grid=%dx%d',
                     tuple(dom), min_dist, rejection_limit, grid.width, grid.height)

        p = Point(_below(narrow(self.random.uniform(dom.xmin, dom.xmax)), dom.xmin, dom.xmax),
                  _below(narrow(self.random.uniform(dom.ymin, dom.ymax)), dom.ymin, dom.ymax))
        active = [p]
        points.append(p)
        grid.insert(p)

        while active:
            i = self.random.index(len(active))
            # swap-remove: order of the remaining active points is irrelevant
            p = active[i]
            last = active.pop()
            if i < len(active):
                active[i] = last
            stats.iterations += 1

            for _ in range(rejection_limit):
                q = self._random_point_around(p, min_dist, max_dist)
                stats.candidates += 1
                if not dom.contains(q):
                    stats.rejected_bounds += 1
                    continue
                if grid.has_neighbor_within(q, min_dist, min_dist_sq):
                    stats.rejected_proximity += 1
                    continue
                active.append(q)
                points.append(q)
                grid.insert(q)

        stats.accepted = len(points)
        stats.time_total = time.perf_counter() - t0
        logger.debug('generate: %d points from %d candidates in %.3f ms',
                     stats.accepted, stats.candidates, stats.time_total * 1000.0)
        return list(points)

    def generate_config(self, config: SamplerConfig) -> List[Point]:
        """Run :meth:`generate` with the bounds and limits of ``config``.

        The config's ``seed`` is not applied here; it selects the stream when
        the sampler is built (see :meth:`from_config`).
        """
        return self.generate(config.xmin, config.ymin, config.xmax, config.ymax,
                             config.min_dist, int(config.rejection_limit))

    @classmethod
    def from_config(cls, config: SamplerConfig) -> 'PoissonSampler':
        return cls(seed=config.seed)


def poisson_disk_points(xmin: float, ymin: float, xmax: float, ymax: float,
                        min_dist: float, rejection_limit: int = DEFAULT_REJECTION_LIMIT,
                        seed: Optional[int] = None) -> List[Point]:
    """One-shot helper: build a sampler for ``seed`` and run it once."""
    return PoissonSampler(seed).generate(xmin, ymin, xmax, ymax, min_dist, rejection_limit)
