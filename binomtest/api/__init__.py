"""
binomtest.api - User-Friendly Facade
====================================

Off-the-shelf interface to the package, phrased in the vocabulary of
hypothesis testing rather than in terms of the internal layers.
In terms of the design patterns, this is the facade pattern.

Examples
--------
>>> from binomtest.api import binomial_test
>>> result = binomial_test(3, 20, p=0.5, alternative="less")
>>> result.is_significant(0.05)
True

Architecture
------------
This facade delegates to the underlying components:
- binomtest.core: enumerations and validation errors
- binomtest.stats.common: search primitive and distribution handle
- binomtest.stats.schemes: the one-sample binomial test evaluator
"""

from binomtest.api.binom_test import (
    BinomTestConfig,
    BinomTestResult,
    binomial_pvalue,
    binomial_test,
    run_test,
)

__all__ = [
    "BinomTestConfig",
    "BinomTestResult",
    "binomial_pvalue",
    "binomial_test",
    "run_test",
]
