"""
Command-line check of a single value.

Usage:
    prime-sieve N
    python -m prime_sieve.cli N
"""

import argparse
from typing import List, Optional

from .sieve import Sieve


def non_negative_int(text: str) -> int:
    """argparse type: parse a non-negative integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='prime-sieve',
        description='Check whether N is prime using a Sieve of Eratosthenes'
    )
    parser.add_argument('N', type=non_negative_int, help='Non-negative integer to test')
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    N = args.N

    if Sieve.new(N).lookup(N):
        print(f"{N} is prime")
    else:
        print(f"{N} is not prime")


if __name__ == '__main__':
    main()
