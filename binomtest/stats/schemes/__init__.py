"""
binomtest.stats.schemes
=======================

Problem-specific statistical schemes.

Each scheme composes the generic methods from `binomtest.stats.common` into a
complete test for a particular experimental setup.

Available schemes:
- one_proportion: exact one-sample binomial test
"""
