"""
binomtest.core
==============

Enumerations and the error taxonomy shared by every layer of the package.
"""

from binomtest.core.errors import (
    BinomTestError,
    InvalidAlternative,
    InvalidProbability,
    InvalidSuccessCount,
    InvalidTrials,
)
from binomtest.core.names import Alternative, AlternativeLike

__all__ = [
    "Alternative",
    "AlternativeLike",
    "BinomTestError",
    "InvalidAlternative",
    "InvalidProbability",
    "InvalidSuccessCount",
    "InvalidTrials",
]
