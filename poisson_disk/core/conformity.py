"""Post-hoc checks for generated point sets.

These are independent of the sampler's grid: they use a KD-tree over the
whole output, so they also catch bugs in the grid query itself.
"""
from __future__ import annotations

from typing import List, Tuple

import numpy as np
from scipy.spatial import cKDTree

from .geometry import Domain

__all__ = ['min_pairwise_distance', 'close_pairs', 'check_point_set']


def _as_float64(points) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    return np.ascontiguousarray(pts.reshape(-1, 2))


def min_pairwise_distance(points) -> float:
    """Smallest distance between two distinct entries; ``inf`` for fewer than two points."""
    pts = _as_float64(points)
    if len(pts) < 2:
        return float('inf')
    dist, _ = cKDTree(pts).query(pts, k=2)
    return float(dist[:, 1].min())


def close_pairs(points, min_dist: float) -> np.ndarray:
    """Index pairs ``(i, j)``, ``i < j``, at distance ``<= min_dist``; shape ``(K, 2)``."""
    pts = _as_float64(points)
    if len(pts) < 2:
        return np.empty((0, 2), dtype=np.int64)
    return cKDTree(pts).query_pairs(r=float(min_dist), output_type='ndarray')


def check_point_set(points, domain: Domain, min_dist: float, verbose: bool = False) -> Tuple[bool, List[str]]:
    """Check containment in ``domain`` and strict ``min_dist`` separation.

    Returns ``(ok, msgs)``; at most 50 offending points/pairs are listed.
    """
    pts = _as_float64(points)
    msgs: List[str] = []
    ok = True
    if len(pts) == 0:
        return False, ["No points."]
    inside = ((pts[:, 0] >= domain.xmin) & (pts[:, 0] < domain.xmax)
              & (pts[:, 1] >= domain.ymin) & (pts[:, 1] < domain.ymax))
    if not np.all(inside):
        for i in np.nonzero(~inside)[0][:50]:
            msgs.append(f"Point {int(i)} ({pts[i, 0]:.6g}, {pts[i, 1]:.6g}) outside domain.")
        ok = False
    pairs = close_pairs(pts, min_dist)
    if len(pairs):
        for i, j in pairs[:50]:
            d = float(np.hypot(*(pts[i] - pts[j])))
            msgs.append(f"Points {int(i)} and {int(j)} are {d:.6g} apart (min_dist {min_dist:.6g}).")
        ok = False
    if verbose and ok:
        msgs.append(f"{len(pts)} points OK (min distance {min_pairwise_distance(pts):.6g}).")
    return ok, msgs
