"""
binomtest.stats.common.distribution
===================================

Binomial distribution handle backed by ``scipy.stats.binom``.

The mass function is evaluated in log space with ``scipy.special``; the
cumulative functions come straight from ``scipy.stats.binom``.

The handle is derived deterministically from ``(n, p)`` and returns plain
Python floats, so callers can negate, compare and sum results without numpy
scalar semantics leaking through.

Examples
--------
>>> from binomtest.stats.common.distribution import BinomialDistribution
>>> dist = BinomialDistribution(n=4, p=0.5)
>>> round(dist.pmf(2), 6)
0.375
>>> round(dist.cdf(4), 6)
1.0
>>> dist.mode_anchor(), dist.mode_anchor_upper()
(2, 2)
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from scipy.special import gammaln, xlog1py, xlogy
from scipy.stats import binom


@dataclass(frozen=True)
class BinomialDistribution:
    """
    Binomial(n, p) with ``pmf``, ``cdf`` and ``sf`` over integers ``0..n``.

    Attributes:
        n: Number of trials
        p: Success probability of a single trial

    Parameters are not validated here; the test evaluator rejects invalid
    ``(k, n, p)`` before a handle is ever built.
    """

    n: int
    p: float

    def pmf(self, x: int) -> float:
        """Probability mass at ``x``.

        Computed as ``exp(ln C(n, x) + x ln p + (n - x) ln(1 - p))`` so that
        mirrored counts of a fair coin get bit-identical masses.
        """
        n, p = self.n, self.p
        if p == 0.0:
            return 1.0 if x == 0 else 0.0
        if p == 1.0:
            return 1.0 if x == n else 0.0
        log_choose = gammaln(n + 1) - (gammaln(x + 1) + gammaln(n - x + 1))
        return float(math.exp(log_choose + (xlogy(x, p) + xlog1py(n - x, -p))))

    def cdf(self, x: int) -> float:
        """P(X <= x)."""
        return float(binom.cdf(x, self.n, self.p))

    def sf(self, x: int) -> float:
        """P(X > x), computed directly rather than as ``1 - cdf(x)``."""
        return float(binom.sf(x, self.n, self.p))

    def mode_anchor(self) -> int:
        """``floor(p * n)``; a search anchor near the mode, not the exact mode."""
        return int(math.floor(self.p * self.n))

    def mode_anchor_upper(self) -> int:
        """``ceil(p * n)``; first index of the upper search interval."""
        return int(math.ceil(self.p * self.n))


__all__ = ["BinomialDistribution"]
