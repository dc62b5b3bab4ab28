"""
binomtest.core.names
====================

Typed names shared across the package.

- `Alternative`: an Enum for the alternative hypothesis of a one-sample test.
- `AlternativeLike`: anything `Alternative.parse` accepts.

Examples
--------
>>> from binomtest.core.names import Alternative
>>> Alternative.TWO_SIDED.value
'two-sided'
>>> Alternative.parse("Less") is Alternative.LESS
True
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from binomtest.core.errors import InvalidAlternative


class Alternative(str, Enum):
    """Alternative hypotheses for the one-sample binomial test.

    - TWO_SIDED: the success probability differs from ``p``
    - LESS: the success probability is smaller than ``p``
    - GREATER: the success probability is larger than ``p``

    Values follow the spelling used by ``scipy.stats.binomtest``.
    """

    TWO_SIDED = "two-sided"
    LESS = "less"
    GREATER = "greater"

    @classmethod
    def parse(cls, value: "AlternativeLike") -> "Alternative":
        """Coerce an enum member or a string into an `Alternative`.

        Strings are matched case-insensitively; ``"two_sided"`` and
        ``"twosided"`` are accepted for the two-sided case.

        Raises:
            InvalidAlternative: if ``value`` names no known alternative.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            member = _ALIASES.get(key)
            if member is not None:
                return member
        raise InvalidAlternative(
            f"Alternative must be one of 'two-sided', 'less', 'greater', got {value!r}"
        )


AlternativeLike = Union[Alternative, str]

_ALIASES = {
    "two-sided": Alternative.TWO_SIDED,
    "two_sided": Alternative.TWO_SIDED,
    "twosided": Alternative.TWO_SIDED,
    "less": Alternative.LESS,
    "greater": Alternative.GREATER,
}
