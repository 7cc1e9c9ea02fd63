#!/usr/bin/env python3
"""
Benchmark sieve population and queries.

Times:
1. Allocation of an unfilled sieve
2. First fill (the actual sieving)
3. Repeated fill (should be a no-op)
4. Batch filter over random candidates

Run at N=10^7 for a quick check.
"""

import argparse
import time

import numpy as np

from prime_sieve.sieve import Sieve


def benchmark(N: int, num_candidates: int = 100000, seed: int = 42):
    """Run the benchmark for a sieve of limit N."""
    print("=" * 60)
    print(f"Sieve Benchmark: N = {N:,}")
    print("=" * 60)

    print("Allocating...", end=" ", flush=True)
    t0 = time.time()
    sieve = Sieve.unfilled(N)
    t_alloc = time.time() - t0
    print(f"{t_alloc:.3f}s  ({len(sieve) / 1e6:.1f}MB)")

    print("First fill...", end=" ", flush=True)
    t0 = time.time()
    sieve.fill()
    t_fill = time.time() - t0
    print(f"{t_fill:.3f}s")

    print("Repeated fill...", end=" ", flush=True)
    t0 = time.time()
    sieve.fill()
    t_refill = time.time() - t0
    print(f"{t_refill * 1e6:.1f}us")

    rng = np.random.default_rng(seed)
    candidates = rng.integers(0, N + 1, size=num_candidates).tolist()

    print(f"Filtering {num_candidates:,} candidates...", end=" ", flush=True)
    t0 = time.time()
    found = sieve.filter(candidates)
    t_filter = time.time() - t0
    print(f"{t_filter:.3f}s")
    print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"Primes <= N:          {sieve.count():,}")
    print(f"Prime candidates:     {len(found):,} / {num_candidates:,}")
    print(f"Fill throughput:      {N / t_fill / 1e6:.1f}M values/s")
    print(f"Lookup throughput:    {num_candidates / t_filter / 1e6:.2f}M lookups/s")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark sieve population')
    parser.add_argument('--N', type=float, default=1e7, help='Sieve limit')
    parser.add_argument('--candidates', type=int, default=100000,
                        help='Number of random candidates to filter')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    args = parser.parse_args()

    benchmark(int(args.N), args.candidates, args.seed)
