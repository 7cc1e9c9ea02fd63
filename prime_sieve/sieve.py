"""
Sieve of Eratosthenes over a fixed inclusive range [0, limit].

Responsibility: the sieve table, its one-shot population, and
bounds-checked queries against it.

State machine:
    unfilled --fill()--> filled   (filled is terminal, fill() is a no-op)

Queries (lookup, filter, primes, count, flags) are only answered in the
filled state; on an unfilled sieve they raise NotPopulatedError.
"""

import operator
import time
from math import isqrt
from typing import Iterable, List

import numpy as np

from .errors import NotPopulatedError, OutOfBoundsError


class Sieve:
    """
    Boolean primality table for all integers 0..limit.

    Parameters
    ----------
    limit : int
        Inclusive upper bound of the values the sieve can answer for.
        Must be a non-negative integer.

    Notes
    -----
    The constructor builds an *unfilled* sieve. Use ``Sieve.new(limit)``
    for one that is ready for queries.

    Population mutates the table without synchronization. Fill the sieve
    before sharing it; after that every query is a read.
    """

    def __init__(self, limit: int):
        limit = operator.index(limit)
        if limit < 0:
            raise ValueError(f"Sieve limit must be non-negative, got {limit}")

        self._limit = limit
        # Optimistic start: every index is "possibly prime" until filled
        self._table = np.ones(limit + 1, dtype=bool)
        self._filled = False

    @classmethod
    def unfilled(cls, limit: int) -> "Sieve":
        """Create a sieve with the given limit, but do not populate it."""
        return cls(limit)

    @classmethod
    def new(cls, limit: int, verbose: bool = False) -> "Sieve":
        """Create and populate a sieve with the given limit."""
        return cls(limit).fill(verbose=verbose)

    @property
    def limit(self) -> int:
        return self._limit

    def max(self) -> int:
        """Return the inclusive upper bound of this sieve."""
        return self._limit

    @property
    def is_filled(self) -> bool:
        return self._filled

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        state = "filled" if self._filled else "unfilled"
        return f"Sieve(limit={self._limit}, {state})"

    def __contains__(self, target) -> bool:
        return self.lookup(target)

    def fill(self, verbose: bool = False) -> "Sieve":
        """
        Populate the sieve in place.

        Has no effect on an already-filled sieve.

        Parameters
        ----------
        verbose : bool
            Print progress to stdout.

        Returns
        -------
        Sieve
            This sieve, to allow ``Sieve(n).fill().lookup(k)``.
        """
        if self._filled:
            return self

        if verbose:
            print(f"    Sieving up to {self._limit:,}...")
        t0 = time.time()

        table = self._table
        table[0] = False
        if self._limit >= 1:
            table[1] = False

        # Any composite <= limit has a prime factor <= isqrt(limit)
        for i in range(2, isqrt(self._limit) + 1):
            if not table[i]:
                continue
            table[2 * i::i] = False

        self._filled = True

        if verbose:
            print(f"    Found {int(np.count_nonzero(table)):,} primes "
                  f"in {time.time() - t0:.2f}s")
        return self

    def _check_filled(self):
        if not self._filled:
            raise NotPopulatedError()

    def lookup(self, target: int) -> bool:
        """
        Return whether ``target`` is prime.

        Parameters
        ----------
        target : int
            Value to test, 0 <= target <= limit.

        Returns
        -------
        bool
            True iff target is prime.

        Raises
        ------
        NotPopulatedError
            If the sieve has not been filled.
        OutOfBoundsError
            If target is negative or greater than limit.
        TypeError
            If target is not an integer.
        """
        self._check_filled()
        target = operator.index(target)
        if target < 0 or target > self._limit:
            raise OutOfBoundsError(target, self._limit)
        return bool(self._table[target])

    def filter(self, candidates: Iterable[int]) -> List[int]:
        """
        Keep only the prime values of ``candidates``.

        Order and duplicates are preserved. If any candidate fails its
        lookup, the error propagates and no result is returned.

        Parameters
        ----------
        candidates : iterable of int
            Values to filter.

        Returns
        -------
        list
            The prime candidates, in their original order.
        """
        result = []
        for value in candidates:
            if self.lookup(value):
                result.append(value)
        return result

    def primes(self) -> np.ndarray:
        """Return all primes <= limit in ascending order."""
        self._check_filled()
        return np.nonzero(self._table)[0]

    def count(self) -> int:
        """Return the number of primes <= limit."""
        self._check_filled()
        return int(np.count_nonzero(self._table))

    def flags(self) -> np.ndarray:
        """Return a read-only copy of the table; flags[i] is True iff i is prime."""
        self._check_filled()
        flags = self._table.copy()
        flags.setflags(write=False)
        return flags
