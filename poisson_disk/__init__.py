"""Public package API for poisson_disk.

Bridson Poisson-disk sampling of 2D points in a rectangle: every pair of
generated points is farther apart than a minimum distance while the set is
close to maximally dense.

Example
-------
    from poisson_disk import PoissonSampler, as_array
    pts = PoissonSampler(seed=42).generate(0, 0, 100, 100, min_dist=5.0)
    xy = as_array(pts)          # (N, 2) float32

The modules under ``poisson_disk.core`` hold the implementation; rely on this
layer for public symbols. Plotting (matplotlib) is imported lazily via
``plot_points``.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("poisson-disk")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import DEFAULT_REJECTION_LIMIT
from .core.geometry import Point, Domain, as_array
from .core.random_stream import RandomStream
from .core.grid import SpatialGrid
from .core.sampler import PoissonSampler, poisson_disk_points
from .core.config import SamplerConfig
from .core.stats import SamplerStats, format_stats_table
from .core.conformity import check_point_set, min_pairwise_distance
from .core.io import read_points_csv, write_points_csv, write_points_vtk
from .core.logging_utils import configure_logging, get_logger


def plot_points(*args, **kwargs):
    """Lazy wrapper around :func:`poisson_disk.core.visualization.plot_points`."""
    return _imp('poisson_disk.core.visualization').plot_points(*args, **kwargs)


__all__ = [
    '__version__',
    # sampling
    'PoissonSampler', 'poisson_disk_points', 'SpatialGrid', 'RandomStream',
    'SamplerConfig', 'SamplerStats', 'format_stats_table', 'DEFAULT_REJECTION_LIMIT',
    # geometry
    'Point', 'Domain', 'as_array',
    # checks
    'check_point_set', 'min_pairwise_distance',
    # io / viz
    'read_points_csv', 'write_points_csv', 'write_points_vtk', 'plot_points',
    # logging
    'configure_logging', 'get_logger',
]
