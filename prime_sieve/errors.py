"""
Errors raised at the sieve boundary.

Responsibility: error kinds only. No sieve logic.
"""


class SieveError(Exception):
    """Base class for all sieve errors."""


class NotPopulatedError(SieveError):
    """A query was made against a sieve that has not been filled yet."""

    def __init__(self, message: str = "Sieve not populated!"):
        super().__init__(message)


class OutOfBoundsError(SieveError, IndexError):
    """
    A queried value lies outside the sieve's range [0, limit].

    Attributes
    ----------
    target : int
        The offending value.
    limit : int
        The configured limit of the sieve that rejected it.
    """

    def __init__(self, target: int, limit: int):
        self.target = target
        self.limit = limit
        super().__init__(f"{target} is out of this sieve's bounds (max {limit})")
