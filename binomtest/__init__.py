"""
binomtest — the exact one-sample binomial test.

Given ``k`` successes in ``n`` independent Bernoulli trials and a
hypothesized success probability ``p``, binomtest reports the probability,
under the null hypothesis, of a result at least as extreme as ``k``.
Three alternatives are supported: two-sided, less and greater.

The distribution primitives come from ``scipy.stats.binom``. What binomtest
adds is the two-sided rule: every outcome on the far side of the mode whose
mass does not exceed the observed mass is counted as extreme, and the far
boundary is located with a monotone binary search rather than by scanning.

Logging goes through loguru and is disabled until
`binomtest.logging.setup_logging` is called.

Example
-------
>>> import binomtest
>>> assert hasattr(binomtest, "core")
>>> assert hasattr(binomtest, "stats")
>>> binomtest.binomial_pvalue(10, 10, 0.5, "less")
1.0
"""

from loguru import logger

from binomtest import api, core, stats
from binomtest.api import (
    BinomTestConfig,
    BinomTestResult,
    binomial_pvalue,
    binomial_test,
    run_test,
)
from binomtest.core import (
    Alternative,
    BinomTestError,
    InvalidAlternative,
    InvalidProbability,
    InvalidSuccessCount,
    InvalidTrials,
)
from binomtest.logging import setup_logging
from binomtest.stats.schemes.one_proportion import evaluate

logger.disable("binomtest")

__all__ = [
    "Alternative",
    "BinomTestConfig",
    "BinomTestError",
    "BinomTestResult",
    "InvalidAlternative",
    "InvalidProbability",
    "InvalidSuccessCount",
    "InvalidTrials",
    "api",
    "binomial_pvalue",
    "binomial_test",
    "core",
    "evaluate",
    "run_test",
    "setup_logging",
    "stats",
]
