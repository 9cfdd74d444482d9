import numpy as np
import pytest

from poisson_disk.core.geometry import as_array
from poisson_disk.core.io import read_points_csv, write_points_csv, write_points_vtk
from poisson_disk.core.sampler import PoissonSampler


@pytest.fixture
def points():
    return PoissonSampler(seed=31).generate(0, 0, 10, 10, 1.0)


def test_csv_round_trip_preserves_single_precision(tmp_path, points):
    path = tmp_path / 'pts.csv'
    write_points_csv(str(path), points)
    assert path.read_text().splitlines()[0] == 'x,y'
    back = read_points_csv(str(path))
    assert back.shape == (len(points), 2)
    assert np.array_equal(back.astype(np.float32), as_array(points))


def test_csv_single_row(tmp_path):
    path = tmp_path / 'one.csv'
    write_points_csv(str(path), [(1.5, -2.25)])
    assert read_points_csv(str(path)).tolist() == [[1.5, -2.25]]


def test_read_csv_rejects_missing_header(tmp_path):
    path = tmp_path / 'bad.csv'
    path.write_text('1,2\n3,4\n')
    with pytest.raises(ValueError):
        read_points_csv(str(path))


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_points_csv(str(tmp_path / 'nope.csv'))


def test_write_rejects_bad_shape(tmp_path):
    with pytest.raises(ValueError):
        write_points_csv(str(tmp_path / 'x.csv'), np.zeros((3, 3)))


def test_vtk_layout(tmp_path, points):
    path = tmp_path / 'pts.vtk'
    n = len(points)
    write_points_vtk(str(path), points, point_data={'order': np.arange(n), 'dir': np.ones((n, 2))})
    lines = path.read_text().splitlines()
    assert lines[0] == '# vtk DataFile Version 2.0'
    assert lines[3] == 'DATASET UNSTRUCTURED_GRID'
    assert lines[4] == f'POINTS {n} double'
    assert f'CELLS {n} {2 * n}' in lines
    assert f'CELL_TYPES {n}' in lines
    assert f'POINT_DATA {n}' in lines
    assert 'SCALARS order double 1' in lines
    assert 'VECTORS dir double' in lines
    first = [float(v) for v in lines[5].split()]
    assert first[2] == 0.0
    assert np.isclose(first[0], points[0].x) and np.isclose(first[1], points[0].y)


def test_vtk_point_data_length_mismatch(tmp_path, points):
    with pytest.raises(ValueError):
        write_points_vtk(str(tmp_path / 'bad.vtk'), points, point_data={'v': np.zeros(len(points) + 1)})
