"""
binomtest.core.errors
=====================

Validation errors raised before any distribution is evaluated.

Every error derives from :class:`ValueError`, so callers that already guard
numerical code with ``except ValueError`` keep working.

Examples
--------
>>> from binomtest.core.errors import InvalidTrials, BinomTestError
>>> issubclass(InvalidTrials, BinomTestError) and issubclass(InvalidTrials, ValueError)
True
"""

from __future__ import annotations


class BinomTestError(ValueError):
    """Base error for invalid binomial test parameters."""


class InvalidTrials(BinomTestError):
    """Raised when the number of trials ``n`` is smaller than one."""


class InvalidSuccessCount(BinomTestError):
    """Raised when the success count ``k`` lies outside ``[0, n]``."""


class InvalidProbability(BinomTestError):
    """Raised when the null probability ``p`` lies outside ``[0, 1]``."""


class InvalidAlternative(BinomTestError):
    """Raised when an alternative hypothesis cannot be recognised."""


__all__ = [
    "BinomTestError",
    "InvalidTrials",
    "InvalidSuccessCount",
    "InvalidProbability",
    "InvalidAlternative",
]
