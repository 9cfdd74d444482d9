"""Matplotlib rendering of generated point sets."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.patches import Circle, Rectangle

from .geometry import Domain
from .logging_utils import get_logger

logger = get_logger('poisson_disk.viz')

__all__ = ['plot_points']


def plot_points(points, outname="points.png", domain: Domain = None, min_dist: float = None,
                show_disks: bool = False, title: str = None, dpi: int = 150):
    """Scatter-plot a point set and save it to ``outname``.

    Args:
        points: (N, 2) array-like of coordinates
        outname: output image path
        domain: if given, draw the sampling rectangle
        min_dist: separation used for the disks and the default title
        show_disks: draw a disk of radius ``min_dist / 2`` around each point;
            disks of a valid set never overlap
        title: plot title (defaults to a point-count summary)
        dpi: output resolution
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    fig, ax = plt.subplots(figsize=(6, 6))
    if domain is not None:
        ax.add_patch(Rectangle((domain.xmin, domain.ymin), domain.width, domain.height,
                               fill=False, edgecolor=(0.85, 0.2, 0.2), linewidth=1.2))
    if show_disks and min_dist:
        disks = [Circle((x, y), 0.5 * min_dist) for x, y in pts]
        ax.add_collection(PatchCollection(disks, facecolor=(0.2, 0.4, 0.8, 0.25),
                                          edgecolor=(0.2, 0.4, 0.8), linewidth=0.4))
    # Scale marker size down for dense point sets so points don't dominate
    npts = max(1, pts.shape[0])
    s = max(0.6, min(12.0, 2000.0 / float(npts)))
    ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black')
    if title is None:
        title = f"{pts.shape[0]} points" + (f", min_dist={min_dist:g}" if min_dist else "")
    ax.set_title(title)
    ax.set_aspect('equal')
    if domain is not None:
        pad = 0.02 * max(domain.width, domain.height)
        ax.set_xlim(domain.xmin - pad, domain.xmax + pad)
        ax.set_ylim(domain.ymin - pad, domain.ymax + pad)
    fig.savefig(outname, dpi=dpi)
    plt.close(fig)
    logger.info('wrote %s (%d points)', outname, pts.shape[0])
