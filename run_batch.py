#!/usr/bin/env python3
"""
Batch primality report.

Sieves up to the configured limit and reports which configured
candidates are prime.

Usage:
    python run_batch.py
    python run_batch.py --config config/custom.yaml
"""

import argparse
import sys
import time

from prime_sieve.config import DEFAULT_CONFIG_PATH, load_config
from prime_sieve.errors import SieveError
from prime_sieve.sieve import Sieve


def run_batch(config: dict) -> dict:
    """
    Build a sieve for config['limit'] and filter config['candidates'].

    Returns
    -------
    dict
        'sieve', 'primes' (prime candidates, original order),
        'prime_count' (number of primes <= limit).

    Raises
    ------
    OutOfBoundsError
        If a candidate lies outside [0, limit].
    """
    sieve = Sieve.new(config['limit'], verbose=config['verbose'])
    primes = sieve.filter(config['candidates'])
    return {
        'sieve': sieve,
        'primes': primes,
        'prime_count': sieve.count(),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description='Report primes among configured candidates')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG_PATH),
                        help='Path to config file')
    args = parser.parse_args(argv)

    config = load_config(args.config)

    print("=" * 60)
    print("Prime Sieve - Batch Report")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  limit = {config['limit']:,}")
    print(f"  candidates = {config['candidates']}")
    print()

    start = time.time()
    try:
        results = run_batch(config)
    except SieveError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print("=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"\nPrime candidates: {results['primes']}")
    print(f"Primes <= {config['limit']:,}: {results['prime_count']:,}")
    print(f"\nTotal runtime: {time.time() - start:.2f}s")


if __name__ == '__main__':
    main()
