"""
binomtest.api.binom_test
========================

Business-oriented facade for the exact one-sample binomial test.

The call shape mirrors ``scipy.stats.binomtest``: successes, trials, null
probability and an alternative spelled ``"two-sided"``, ``"less"`` or
``"greater"``. Results come back as a `BinomTestResult` that knows the
observed proportion and can be judged against a significance level.

Examples
--------
>>> from binomtest.api.binom_test import binomial_test, BinomTestConfig, run_test
>>>
>>> # Is a coin that landed heads 9 times out of 10 fair?
>>> result = binomial_test(9, 10, p=0.5)
>>> result.pvalue < 0.05
True
>>> result.statistic
0.9
>>> result.is_significant(0.05)
True
>>>
>>> # One-sided check with a reusable configuration
>>> config = BinomTestConfig(alternative="greater", alpha=0.05)
>>> run_test(9, 10, 0.5, config).is_significant(config.alpha)
True
"""

from __future__ import annotations
from dataclasses import dataclass

from loguru import logger

from binomtest.core.names import Alternative, AlternativeLike
from binomtest.stats.schemes.one_proportion.evaluator import evaluate


def _validate_alpha(alpha: float) -> None:
    if not (0.0 < alpha < 1.0):
        raise ValueError(f"Alpha must be in (0,1), got {alpha}")


@dataclass(frozen=True)
class BinomTestResult:
    """
    Outcome of an exact binomial test.

    Attributes
    ----------
    k : int
        Number of observed successes
    n : int
        Number of trials
    p : float
        Success probability under the null hypothesis
    alternative : Alternative
        Alternative hypothesis the p-value was computed for
    pvalue : float
        Exact p-value
    """

    k: int
    n: int
    p: float
    alternative: Alternative
    pvalue: float

    @property
    def statistic(self) -> float:
        """Observed proportion of successes, ``k / n``."""
        return self.k / self.n

    def is_significant(self, alpha: float = 0.05) -> bool:
        """Whether the null hypothesis is rejected at level ``alpha``."""
        _validate_alpha(alpha)
        return self.pvalue <= alpha


@dataclass
class BinomTestConfig:
    """
    Configuration for repeated binomial tests.

    Parameters
    ----------
    alternative : Alternative or str, default="two-sided"
        Alternative hypothesis; strings use the scipy spelling
    alpha : float, default=0.05
        Significance level used when judging results

    Examples
    --------
    >>> BinomTestConfig(alternative="less", alpha=0.1).validate()
    >>> BinomTestConfig(alpha=1.5).validate()
    Traceback (most recent call last):
        ...
    ValueError: Alpha must be in (0,1), got 1.5
    """

    alternative: AlternativeLike = Alternative.TWO_SIDED
    alpha: float = 0.05

    def validate(self) -> None:
        """Validate configuration."""
        _validate_alpha(self.alpha)
        Alternative.parse(self.alternative)


def binomial_test(
    k: int,
    n: int,
    p: float = 0.5,
    alternative: AlternativeLike = "two-sided",
) -> BinomTestResult:
    """
    Run an exact binomial test.

    Parameters
    ----------
    k : int
        Number of observed successes
    n : int
        Number of trials
    p : float, default=0.5
        Success probability under the null hypothesis
    alternative : {"two-sided", "less", "greater"} or Alternative
        Which tail(s) count as extreme

    Returns
    -------
    BinomTestResult
        p-value together with the inputs it was computed from

    Raises
    ------
    InvalidTrials, InvalidSuccessCount, InvalidProbability, InvalidAlternative
        On invalid parameters (all subclasses of ``ValueError``)
    """
    alt = Alternative.parse(alternative)
    pvalue = evaluate(k, n, p, alt)
    logger.debug(f"binomial_test(k={k}, n={n}, p={p}, {alt.value}) -> {pvalue:.6g}")
    return BinomTestResult(k=k, n=n, p=p, alternative=alt, pvalue=pvalue)


def binomial_pvalue(
    k: int,
    n: int,
    p: float = 0.5,
    alternative: AlternativeLike = "two-sided",
) -> float:
    """
    Shorthand for ``binomial_test(k, n, p, alternative).pvalue``.

    Examples
    --------
    >>> binomial_pvalue(0, 3, 0.5, "greater")
    1.0
    """
    return evaluate(k, n, p, alternative)


def run_test(k: int, n: int, p: float, config: BinomTestConfig) -> BinomTestResult:
    """
    Run a binomial test using the settings in ``config``.

    The configuration is validated first, so a bad ``alpha`` is reported even
    when the test itself would succeed.
    """
    config.validate()
    return binomial_test(k, n, p, config.alternative)
