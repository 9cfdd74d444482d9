import math

import numpy as np

from poisson_disk.core.conformity import check_point_set, close_pairs, min_pairwise_distance
from poisson_disk.core.geometry import Domain
from poisson_disk.core.sampler import PoissonSampler

UNIT = Domain(0.0, 0.0, 1.0, 1.0)


def test_min_pairwise_distance_simple():
    pts = [(0.0, 0.0), (3.0, 4.0), (0.0, 1.0)]
    assert math.isclose(min_pairwise_distance(pts), 1.0)
    assert min_pairwise_distance([(1.0, 1.0)]) == float('inf')
    assert min_pairwise_distance([]) == float('inf')


def test_close_pairs_include_exact_distance():
    pts = [(0.0, 0.0), (3.0, 4.0), (9.0, 9.0)]
    pairs = close_pairs(pts, 5.0)
    assert pairs.tolist() == [[0, 1]]
    assert len(close_pairs(pts, 4.99)) == 0


def test_check_point_set_reports_problems():
    pts = np.array([[0.1, 0.1], [0.15, 0.1], [1.0, 0.5]])
    ok, msgs = check_point_set(pts, UNIT, 0.2)
    assert not ok
    assert any('outside domain' in m for m in msgs)
    assert any('apart' in m for m in msgs)


def test_check_point_set_empty_is_not_ok():
    ok, msgs = check_point_set([], UNIT, 0.1)
    assert not ok and msgs == ["No points."]


def test_sampler_output_passes_check():
    sampler = PoissonSampler(seed=12)
    pts = sampler.generate(0, 0, 1, 1, 0.0625)
    ok, msgs = check_point_set(pts, sampler.domain, 0.0625, verbose=True)
    assert ok, msgs
    assert min_pairwise_distance(pts) > 0.0625
