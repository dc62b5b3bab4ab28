"""
binomtest.stats.common
======================

Common statistical methods and utilities.

This module contains generic, reusable pieces that are independent of any
particular test: a monotone integer search with a total-order float
comparator, and a binomial distribution handle over ``scipy.stats.binom``.
"""

from binomtest.stats.common.distribution import BinomialDistribution
from binomtest.stats.common.search import binary_search, total_cmp

__all__ = ["BinomialDistribution", "binary_search", "total_cmp"]
