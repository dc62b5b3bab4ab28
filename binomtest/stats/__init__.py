"""
Statistical methods for the exact binomial test.

The package separates generic methods from scheme-specific implementations:

1. **Common** (binomtest.stats.common):
   Generic, reusable algorithms independent of the problem domain: the
   monotone extremal search and the binomial distribution handle.

2. **Schemes** (binomtest.stats.schemes):
   Problem-specific implementations that apply the generic methods to a
   particular experimental setup (the one-sample binomial test).

Example:
--------
>>> # Generic method (reusable across schemes)
>>> from binomtest.stats.common.search import binary_search
>>> binary_search(lambda x: float(x), 3.5, 0, 10)
3

>>> # Scheme-specific application
>>> from binomtest.stats.schemes.one_proportion import evaluate
>>> from binomtest.core.names import Alternative
>>> evaluate(0, 5, 0.2, Alternative.GREATER)
1.0
"""
