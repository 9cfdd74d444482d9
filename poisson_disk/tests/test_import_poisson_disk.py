"""Smoke test to ensure the top-level package import works and exposes the
flat public API (`poisson_disk/__init__.py`).
"""

def test_import_poisson_disk_smoke():
    import poisson_disk  # noqa: F401
    assert hasattr(poisson_disk, 'PoissonSampler')
    assert hasattr(poisson_disk, 'SpatialGrid')
    assert hasattr(poisson_disk, 'plot_points')  # lazy wrapper
    assert isinstance(poisson_disk.__version__, str)
