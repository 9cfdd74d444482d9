import pytest

from poisson_disk.core.random_stream import RandomStream


def test_same_seed_same_sequence():
    a = RandomStream(123)
    b = RandomStream(123)
    assert [a.next_double() for _ in range(20)] == [b.next_double() for _ in range(20)]


def test_doubles_in_unit_interval():
    s = RandomStream(0)
    vals = [s.next_double() for _ in range(2000)]
    assert all(0.0 <= v < 1.0 for v in vals)
    assert 0.4 < sum(vals) / len(vals) < 0.6


def test_uniform_and_index_ranges():
    s = RandomStream(1)
    for _ in range(500):
        u = s.uniform(-3.0, 5.0)
        assert -3.0 <= u < 5.0
        i = s.index(7)
        assert 0 <= i < 7
    assert s.index(1) == 0


def test_unseeded_streams_differ():
    a, b = RandomStream(), RandomStream()
    assert [a.next_double() for _ in range(4)] != [b.next_double() for _ in range(4)]


def test_spawn_is_reproducible_and_independent():
    kids = RandomStream(99).spawn(3)
    again = RandomStream(99).spawn(3)
    seqs = [[k.next_double() for _ in range(5)] for k in kids]
    assert seqs == [[k.next_double() for _ in range(5)] for k in again]
    assert len({tuple(s) for s in seqs}) == 3
    parent = RandomStream(99)
    assert [parent.next_double() for _ in range(5)] not in seqs


@pytest.mark.parametrize('seed', [-42, -1, -(2 ** 63 - 1)])
def test_negative_seed_reproduces_and_differs_from_abs(seed):
    a, b = RandomStream(seed), RandomStream(seed)
    seq = [a.next_double() for _ in range(6)]
    assert seq == [b.next_double() for _ in range(6)]
    other = RandomStream(abs(seed))
    assert seq != [other.next_double() for _ in range(6)]


def test_negative_seed_matches_its_unsigned_bit_pattern():
    a, b = RandomStream(-42), RandomStream(2 ** 64 - 42)
    assert [a.next_double() for _ in range(4)] == [b.next_double() for _ in range(4)]


def test_unseeded_entropy_replays_stream():
    a = RandomStream()
    b = RandomStream(a.entropy)
    assert [a.next_double() for _ in range(6)] == [b.next_double() for _ in range(6)]
