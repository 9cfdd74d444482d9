"""Central sampling defaults and numeric constants.

Keeps the handful of literals shared by the grid, the sampler and the CLI in
one place so they are tuned consistently.
"""
from __future__ import annotations

import math

import numpy as np

# Candidates tried around each picked active point (Bridson's k)
DEFAULT_REJECTION_LIMIT: int = 30

# Cell size is min_dist / sqrt(d) for d = 2
SQRT2: float = math.sqrt(2.0)

# Coordinates are generated in single precision
COORD_DTYPE = np.float32

TWO_PI: float = 2.0 * math.pi

__all__ = [
    'DEFAULT_REJECTION_LIMIT',
    'SQRT2',
    'COORD_DTYPE',
    'TWO_PI',
]
