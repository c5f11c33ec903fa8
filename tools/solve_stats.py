#!/usr/bin/env python3
"""
Solve many random scrambles and report the distribution of optimal lengths.

Usage:
    python tools/solve_stats.py [--samples N] [--scramble K] [--seed S] [--chunked]
"""

import argparse
import os
import sys
import time
from collections import Counter

import numpy as np
from tqdm import tqdm

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from Cube_class import Cube
from CubeSolver import CubeSolver
from cube_moves import DEFAULT_SCRAMBLE_MOVES, scramble


def collect_depths(samples, scramble_moves, seed=None, chunked=False):
    """Return a Counter of optimal solution depth -> number of scrambles."""
    rng = np.random.default_rng(seed)
    solver = CubeSolver(chunked=chunked)
    depths = Counter()

    for _ in tqdm(range(samples), desc="Solving"):
        cube, _ = scramble(Cube(), scramble_moves, rng=rng)
        depths[solver.solve(cube).depth] += 1

    return depths


def main():
    parser = argparse.ArgumentParser(
        description="Optimal solution length statistics for random scrambles"
    )
    parser.add_argument("--samples", type=int, default=20, help="Number of scrambles to solve")
    parser.add_argument("--scramble", type=int, default=DEFAULT_SCRAMBLE_MOVES, help="Random moves per scramble")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--chunked", action="store_true", help="Use the chunked search")
    args = parser.parse_args()

    print("=" * 50)
    print("SOLVE STATISTICS")
    print("=" * 50)

    start_time = time.time()
    depths = collect_depths(args.samples, args.scramble, seed=args.seed, chunked=args.chunked)
    elapsed_time = time.time() - start_time

    total = sum(depths.values())
    mean = sum(d * n for d, n in depths.items()) / total if total else 0.0

    print()
    print(f"Scrambles solved: {total}")
    print(f"Time elapsed: {elapsed_time:.1f} seconds")
    print(f"Mean optimal length: {mean:.2f}")
    print()
    print("Depth histogram:")
    for depth in sorted(depths):
        print(f"  {depth:2d}: {depths[depth]:5d} {'#' * depths[depth]}")


if __name__ == "__main__":
    main()
