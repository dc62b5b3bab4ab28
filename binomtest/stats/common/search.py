"""
binomtest.stats.common.search
=============================

Generic extremal search over an integer domain.

`binary_search` locates where a monotone non-decreasing function crosses a
target value. It knows nothing about distributions: the caller orients the
objective (for example by negating a probability mass function) so that the
slice being searched is non-decreasing.

Comparisons go through `total_cmp`, an IEEE-754 totalOrder comparator, so a
NaN or a signed zero always lands on a well-defined branch.

Examples
--------
>>> from binomtest.stats.common.search import binary_search
>>> squares = lambda x: float(x * x)
>>> binary_search(squares, 49.0, 0, 20)
7
>>> binary_search(squares, 50.0, 0, 20)  # largest x with x*x <= 50
7
>>> binary_search(squares, -1.0, 0, 20)
0
"""

from __future__ import annotations
import struct
from typing import Callable

_SIGN_MASK = 0x7FFF_FFFF_FFFF_FFFF


def _total_order_key(value: float) -> int:
    """Map a float onto a signed integer whose ordering is IEEE-754 totalOrder."""
    (bits,) = struct.unpack("<q", struct.pack("<d", value))
    # Negative floats sort in reverse bit order; flip everything but the sign.
    return bits ^ _SIGN_MASK if bits < 0 else bits


def total_cmp(a: float, b: float) -> int:
    """Three-way comparison of two floats under IEEE-754 totalOrder.

    Returns -1, 0 or 1. Unlike ``<``/``==``, this never mis-branches on NaN:
    ``-NaN < -inf < ... < -0.0 < +0.0 < ... < +inf < +NaN``.

    Examples:
        >>> total_cmp(1.0, 2.0), total_cmp(2.0, 2.0), total_cmp(3.0, 2.0)
        (-1, 0, 1)
        >>> total_cmp(-0.0, 0.0)
        -1
        >>> total_cmp(float("nan"), float("inf"))
        1
    """
    ka, kb = _total_order_key(a), _total_order_key(b)
    return (ka > kb) - (ka < kb)


def binary_search(
    f: Callable[[int], float], key: float, low: int, high: int
) -> int:
    """
    Find the boundary index where a non-decreasing ``f`` crosses ``key``.

    Args:
        f: Function over integers, assumed non-decreasing on ``[low, high]``
        key: Target value
        low: Inclusive lower bound of the search interval
        high: Inclusive upper bound of the search interval

    Returns:
        An index ``mid`` with ``f(mid) == key`` if one is hit during the
        search. Otherwise the largest index whose value does not exceed
        ``key``, saturated at ``0``.

    Note:
        Monotonicity is not checked. A non-monotone ``f`` yields a
        well-defined but meaningless index.
    """
    while low < high:
        mid = low + (high - low) // 2
        order = total_cmp(f(mid), key)
        if order < 0:
            low = mid + 1
        elif order == 0:
            return mid
        else:
            if mid == 0:
                return 0
            high = mid - 1

    if f(low) <= key:
        return low
    return max(low - 1, 0)


__all__ = ["binary_search", "total_cmp"]
