"""
binomtest.stats.schemes.one_proportion
======================================

One-sample binomial scheme: ``k`` successes in ``n`` trials tested against a
hypothesized success probability ``p``.

This scheme applies the generic search and distribution helpers from
`binomtest.stats.common` to the exact binomial test.

Example:
--------
>>> from binomtest.stats.schemes.one_proportion import evaluate
>>> from binomtest.core.names import Alternative
>>> evaluate(10, 10, 0.5, Alternative.LESS)
1.0
"""

from binomtest.stats.schemes.one_proportion.evaluator import (
    evaluate,
    validate_parameters,
)

__all__ = ["evaluate", "validate_parameters"]
