#!/usr/bin/env python3
"""Benchmark sampler throughput as the point count grows.

Total work is roughly proportional to accepted points times the rejection
limit; points/sec should stay flat across sizes if neighbor queries are O(1).
"""

import argparse
import time

from poisson_disk import PoissonSampler, format_stats_table


def benchmark_sampler(min_dist, rejection_limit=30, size=100.0, n_iters=3, seed=0):
    """Return (avg seconds per run, stats dict of the last run)."""
    sampler = PoissonSampler(seed=seed)
    # Warm up
    sampler.generate(0.0, 0.0, size, size, min_dist, rejection_limit)
    start = time.time()
    for _ in range(n_iters):
        sampler.generate(0.0, 0.0, size, size, min_dist, rejection_limit)
    elapsed = time.time() - start
    return elapsed / n_iters, sampler.stats.to_dict()


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--rejection-limit', type=int, default=30)
    p.add_argument('--iters', type=int, default=3)
    args = p.parse_args()

    rows = {}
    for min_dist in (8.0, 4.0, 2.0, 1.0):
        avg, stats = benchmark_sampler(min_dist, args.rejection_limit, n_iters=args.iters)
        rows[f"d={min_dist:g}"] = stats
        print(f"min_dist={min_dist:5g}  points={stats['accepted']:7d}  "
              f"avg={avg * 1000.0:9.2f} ms  rate={stats['accepted'] / avg:10.0f} pts/s")
    print()
    print(format_stats_table(rows))


if __name__ == "__main__":
    main()
