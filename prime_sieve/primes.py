"""
Prime generation utilities.

Responsibility: one-call helpers built on Sieve. No sieve logic here.
"""

import numpy as np

from .sieve import Sieve


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    return Sieve.new(N).flags()


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    return Sieve.new(N).primes()


def is_prime(n: int) -> bool:
    """Check a single value by sieving up to it."""
    return Sieve.new(n).lookup(n)
