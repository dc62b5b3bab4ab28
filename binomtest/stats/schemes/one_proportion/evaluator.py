"""
binomtest.stats.schemes.one_proportion.evaluator
================================================

Exact p-value of the one-sample binomial test.

Given ``k`` successes in ``n`` trials and a null success probability ``p``,
`evaluate` returns the probability, under the null, of an outcome at least as
extreme as ``k`` in the direction(s) named by the alternative.

The two-sided p-value adds to the observed tail every outcome on the opposite
side of the distribution whose mass does not exceed the observed mass. The
opposite-side boundary is found with the generic `binary_search`, oriented by
negating the mass function when the search runs upward from the mode.

Examples
--------
>>> from binomtest.core.names import Alternative
>>> from binomtest.stats.schemes.one_proportion.evaluator import evaluate
>>> round(evaluate(1, 1, 0.25, Alternative.TWO_SIDED), 12)
0.25
>>> evaluate(0, 10, 0.3, Alternative.GREATER)
1.0
"""

from __future__ import annotations
import math

from loguru import logger

from binomtest.core.errors import (
    InvalidProbability,
    InvalidSuccessCount,
    InvalidTrials,
)
from binomtest.core.names import Alternative, AlternativeLike
from binomtest.stats.common.distribution import BinomialDistribution
from binomtest.stats.common.search import binary_search


def validate_parameters(k: int, n: int, p: float) -> None:
    """Reject invalid ``(k, n, p)``; the first failing check wins.

    Raises:
        InvalidTrials: if ``n < 1``
        InvalidSuccessCount: if ``k`` is outside ``[0, n]``
        InvalidProbability: if ``p`` is outside ``[0, 1]`` (NaN included)
    """
    if n < 1:
        raise InvalidTrials(f"Number of trials n must be > 0, got {n}")
    if k > n or k < 0:
        raise InvalidSuccessCount(
            f"Number of successes k must be in [0, n], got k={k}, n={n}"
        )
    if not (0.0 <= p <= 1.0):
        raise InvalidProbability(f"Probability p must be in [0, 1], got {p}")


def evaluate(k: int, n: int, p: float, alternative: AlternativeLike) -> float:
    """
    Compute the exact binomial test p-value.

    Args:
        k: Number of observed successes
        n: Number of trials
        p: Success probability under the null hypothesis
        alternative: Which tail(s) count as extreme; an `Alternative` or
            its string value

    Returns:
        The p-value. May underflow to ``0.0`` for extremely unlikely ``k``.

    Raises:
        InvalidTrials, InvalidSuccessCount, InvalidProbability: on invalid
        parameters, before any distribution is evaluated.
        InvalidAlternative: if ``alternative`` names no known hypothesis.
    """
    validate_parameters(k, n, p)
    alternative = Alternative.parse(alternative)
    dist = BinomialDistribution(n=n, p=p)

    if alternative is Alternative.LESS:
        return dist.cdf(k)
    if alternative is Alternative.GREATER:
        # P(X >= 0) is one by definition.
        if k == 0:
            return 1.0
        return dist.sf(k - 1)
    return _two_sided(k, dist)


def _two_sided(k: int, dist: BinomialDistribution) -> float:
    d = dist.pmf(k)
    anchor = dist.mode_anchor()

    if k == anchor:
        logger.debug(f"k={k} sits on the mode anchor; two-sided p-value is 1")
        return 1.0

    if k < anchor:
        # Upper side, searched on -pmf: x is the last index with pmf(x) >= d,
        # so the tail is x + 1 .. n.
        x = binary_search(
            lambda i: -dist.pmf(i), -d, dist.mode_anchor_upper(), dist.n
        )
        logger.debug(f"k={k} below anchor {anchor}; upper tail starts after x={x}")
        return dist.cdf(k) + dist.sf(x)

    # Lower side: largest x with pmf(x) <= d.
    x = binary_search(dist.pmf, d, 0, anchor)
    if x == 0 and d < dist.pmf(0):
        lower = 0.0
    else:
        lower = dist.cdf(x)
    logger.debug(f"k={k} above anchor {anchor}; lower tail ends at x={x}")
    return lower + dist.sf(k - 1)


__all__ = ["evaluate", "validate_parameters"]
