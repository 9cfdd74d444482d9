"""Seedable, splittable uniform random source for the sampler.

A single :class:`RandomStream` is threaded through every draw of one
sampling run (seed position, active-point selection, candidate angle and
radius), so a run is reproducible from one integer seed.

Splitting uses ``numpy.random.SeedSequence.spawn``: child streams are
statistically independent of each other and of the parent, and the
children produced from a given seed are themselves reproducible. This is
how callers should obtain one stream per sampler when running several
samplings side by side.
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class RandomStream:
    __slots__ = ('_seed_seq', '_gen')

    def __init__(self, seed: Optional[int] = None, *, seed_sequence: Optional[np.random.SeedSequence] = None):
        if seed_sequence is None:
            # seed=None draws fresh OS entropy; read it back via .entropy to replay a run
            if seed is not None and seed < 0:
                # signed 64-bit seeds map to their two's-complement bit pattern
                seed = int(seed) & _UINT64_MASK
            seed_sequence = np.random.SeedSequence(seed)
        self._seed_seq = seed_sequence
        self._gen = np.random.Generator(np.random.PCG64(seed_sequence))

    @property
    def entropy(self):
        """Root entropy of this stream (the seed for directly seeded streams)."""
        return self._seed_seq.entropy

    def next_double(self) -> float:
        """Next uniform double in ``[0, 1)``."""
        return float(self._gen.random())

    def uniform(self, lo: float, hi: float) -> float:
        """``lo + (hi - lo) * u`` for one fresh ``u`` in ``[0, 1)``."""
        return lo + (hi - lo) * self.next_double()

    def index(self, n: int) -> int:
        """Uniform index in ``[0, n)`` drawn from a single double."""
        i = int(self.next_double() * n)
        # guard against u * n rounding up to n
        return i if i < n else n - 1

    def spawn(self, n: int) -> List['RandomStream']:
        """Split off ``n`` independent child streams."""
        return [RandomStream(seed_sequence=child) for child in self._seed_seq.spawn(n)]

    def __repr__(self) -> str:
        return f"RandomStream(entropy={self.entropy!r})"


__all__ = ['RandomStream']
