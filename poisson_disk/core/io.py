"""Lightweight point-set file I/O.

- write_points_csv / read_points_csv: plain ``x,y`` CSV with a header row
- write_points_vtk: legacy VTK for ParaView/VisIt visualization

Point sets are exchanged as ``(N, 2)`` arrays (or anything
``numpy.asarray`` turns into one, such as a list of ``Point``).
"""
from __future__ import annotations

from typing import Dict, Optional

import numpy as np

__all__ = ['write_points_csv', 'read_points_csv', 'write_points_vtk']


def _check_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {pts.shape}")
    return pts


def write_points_csv(filepath: str, points) -> None:
    """Write points as ``x,y`` rows under a header line.

    Coordinates are written with 9 significant digits, enough to round-trip
    single-precision values exactly.
    """
    pts = _check_points(points)
    np.savetxt(filepath, pts, fmt='%.9g', delimiter=',', header='x,y', comments='')


def read_points_csv(filepath: str) -> np.ndarray:
    """Read a CSV written by :func:`write_points_csv` into an ``(N, 2)`` float64 array.

    Raises
    ------
    ValueError
        If the file has no ``x,y`` header or rows are not two columns.
    FileNotFoundError
        If the file doesn't exist.
    """
    with open(filepath, 'r') as f:
        header = f.readline().strip().replace(' ', '').lower()
        if header != 'x,y':
            raise ValueError(f"Expected 'x,y' header in {filepath}, got {header!r}")
        data = np.loadtxt(f, delimiter=',', dtype=np.float64, ndmin=2)
    if data.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if data.shape[1] != 2:
        raise ValueError(f"Expected 2 columns in {filepath}, got {data.shape[1]}")
    return data


def write_points_vtk(filepath: str,
                     points,
                     point_data: Optional[Dict[str, np.ndarray]] = None,
                     title: str = "Poisson-disk points") -> None:
    """Write a point set to legacy VTK format (ASCII) as VTK_VERTEX cells.

    Parameters
    ----------
    filepath : str
        Output .vtk file path
    points : (N, 2) array-like
        Point coordinates; z=0 is added.
    point_data : dict, optional
        Per-point scalars ``(N,)`` or vectors ``(N, 2)`` / ``(N, 3)``.
    title : str
        Dataset title/description

    Examples
    --------
    >>> pts = PoissonSampler(seed=1).generate(0, 0, 10, 10, 1.0)
    >>> write_points_vtk('points.vtk', pts,
    ...                  point_data={'order': np.arange(len(pts))})
    """
    pts = _check_points(points)
    points_3d = np.column_stack([pts, np.zeros(len(pts))])
    n = len(points_3d)

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {n} double\n")
        for pt in points_3d:
            f.write(f"{pt[0]:.9e} {pt[1]:.9e} {pt[2]:.9e}\n")

        # one single-vertex cell per point
        f.write(f"\nCELLS {n} {n * 2}\n")
        for i in range(n):
            f.write(f"1 {i}\n")

        # 1 = VTK_VERTEX
        f.write(f"\nCELL_TYPES {n}\n")
        for _ in range(n):
            f.write("1\n")

        if point_data:
            f.write(f"\nPOINT_DATA {n}\n")
            for name, data in point_data.items():
                _write_vtk_field(f, name, np.asarray(data), n)


def _write_vtk_field(f, name: str, data: np.ndarray, n: int) -> None:
    if data.shape[0] != n:
        raise ValueError(f"point_data[{name!r}] has {data.shape[0]} entries, expected {n}")
    if data.ndim == 1:
        f.write(f"SCALARS {name} double 1\n")
        f.write("LOOKUP_TABLE default\n")
        for val in data:
            f.write(f"{float(val):.9e}\n")
    elif data.ndim == 2 and data.shape[1] in (2, 3):
        if data.shape[1] == 2:
            data = np.column_stack([data, np.zeros(n)])
        f.write(f"VECTORS {name} double\n")
        for vec in data:
            f.write(f"{vec[0]:.9e} {vec[1]:.9e} {vec[2]:.9e}\n")
    else:
        raise ValueError(f"point_data[{name!r}] must be (N,) or (N, 2|3), got shape {data.shape}")
