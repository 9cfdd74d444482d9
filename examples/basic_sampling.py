"""
poisson_disk Example: Basic Sampling

This example demonstrates the most basic usage of poisson_disk:
1. Generate a point set in a rectangle
2. Verify separation and containment
3. Save the points to CSV and VTK
4. Visualize the result

Perfect for: First-time users, quick start guide
"""

import numpy as np

from poisson_disk import (PoissonSampler, as_array, check_point_set, min_pairwise_distance,
                          plot_points, write_points_csv, write_points_vtk)


def main():
    print("=" * 60)
    print("poisson_disk Example: Basic Sampling")
    print("=" * 60)

    # Step 1: Sample a 100 x 100 square with min distance 5
    print("\n[1] Generating points...")
    sampler = PoissonSampler(seed=42)
    points = sampler.generate(0.0, 0.0, 100.0, 100.0, min_dist=5.0, rejection_limit=30)
    print(f"  {len(points)} points, seed point {points[0]}")

    # Step 2: Independent checks (KD-tree, not the sampler's grid)
    print("\n[2] Checking the point set...")
    ok, msgs = check_point_set(points, sampler.domain, 5.0)
    print(f"  valid: {ok}  closest pair: {min_pairwise_distance(points):.4f}")
    for m in msgs:
        print("  ", m)

    # Step 3: Run statistics
    print("\n[3] Run statistics...")
    for key, value in sampler.stats.to_dict().items():
        print(f"  {key:>20}: {value}")

    # Step 4: Export
    print("\n[4] Exporting...")
    xy = as_array(points)
    write_points_csv('basic_sampling.csv', xy)
    write_points_vtk('basic_sampling.vtk', xy, point_data={'order': np.arange(len(xy))})
    print("  wrote basic_sampling.csv, basic_sampling.vtk")

    # Step 5: Plot with non-overlapping min_dist/2 disks
    print("\n[5] Plotting...")
    plot_points(points, 'basic_sampling.png', domain=sampler.domain, min_dist=5.0, show_disks=True)
    print("  wrote basic_sampling.png")


if __name__ == "__main__":
    main()
