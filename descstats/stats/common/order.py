"""
descstats.stats.common.order
============================

Order-statistic helpers over already-sorted sequences.

These functions never sort: callers pass an ascending sequence (the engine
keeps a sorted copy of its sample). They are dataset-agnostic and are shared
by `median`, `quartiles` and `percentile` so the three agree on the same
inputs.

Examples
--------
>>> from descstats.stats.common.order import median_of_sorted, tukey_hinges
>>> median_of_sorted([1.0, 2.0, 3.0, 4.0])
2.5
>>> tukey_hinges([6.0, 7.0, 15.0, 39.0, 40.0, 41.0, 42.0, 43.0, 47.0, 49.0])
(15.0, 40.5, 43.0)
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple

from descstats.core.errors import InvariantError


def median_of_sorted(xs: Sequence[float]) -> float:
    """
    Median of an ascending sequence.

    Odd length returns the middle element; even length the average of the
    two central elements, computed so that it stays finite for finite input.

    Raises:
        InvariantError: If ``xs`` is empty

    >>> median_of_sorted([1.7e308, 1.7e308])
    1.7e+308
    """
    n = len(xs)
    if n == 0:
        raise InvariantError("Cannot compute median of an empty sequence.")

    mid = n // 2
    if n % 2 == 1:
        return float(xs[mid])
    return midpoint(xs[mid - 1], xs[mid])


def midpoint(a: float, b: float) -> float:
    """Average of ``a <= b`` without overflowing near the float limits.

    >>> midpoint(4.0, 5.0), midpoint(-1.7e308, 1.7e308)
    (4.5, 0.0)
    """
    if (a < 0.0) != (b < 0.0):
        # Opposite signs: the sum cannot overflow, the difference can.
        return (a + b) / 2.0
    return a + (b - a) / 2.0


def hinge_halves(
    xs: Sequence[float],
) -> Tuple[Sequence[float], Sequence[float]]:
    """Split an ascending sequence into the lower and upper halves used for hinges.

    The central element is excluded from both halves when the length is odd.

    >>> hinge_halves([1.0, 2.0, 3.0, 4.0, 5.0])
    ([1.0, 2.0], [4.0, 5.0])
    """
    n = len(xs)
    mid = n // 2
    lower = xs[:mid]
    upper = xs[mid:] if n % 2 == 0 else xs[mid + 1 :]
    return lower, upper


def tukey_hinges(xs: Sequence[float]) -> Tuple[float, float, float]:
    """
    Quartiles (Q1, Q2, Q3) of an ascending sequence by Tukey's hinges.

    Q2 is the median; Q1 and Q3 are medians of the lower and upper halves
    (see `hinge_halves`). A single element is its own three quartiles.

    Raises:
        InvariantError: If ``xs`` is empty
    """
    n = len(xs)
    if n == 0:
        raise InvariantError("Cannot compute quartiles of an empty sequence.")
    if n == 1:
        x = float(xs[0])
        return x, x, x

    lower, upper = hinge_halves(xs)
    return median_of_sorted(lower), median_of_sorted(xs), median_of_sorted(upper)


def interpolated_percentile(xs: Sequence[float], p: float) -> float:
    """
    p-th percentile (0 ≤ p ≤ 100) of an ascending sequence, linear interpolation.

    The rank ``r = p/100 * (n-1)`` indexes the sorted sequence; a fractional
    rank interpolates between the two bracketing order statistics. p == 0 and
    p == 100 return the extremes exactly. The range of ``p`` is checked by the
    caller.

    >>> interpolated_percentile([10.0, 20.0, 30.0, 40.0], 25.0)
    17.5
    >>> interpolated_percentile([3.0, 6.0, 9.0], 100.0)
    9.0
    """
    n = len(xs)
    if n == 0:
        raise InvariantError("Cannot compute a percentile of an empty sequence.")

    if p == 0.0:
        return float(xs[0])
    if p == 100.0:
        return float(xs[-1])

    rank = (p / 100.0) * (n - 1)
    lo = math.floor(rank)
    hi = math.ceil(rank)
    w = rank - lo

    if lo == hi:
        return float(xs[lo])

    return (1.0 - w) * xs[lo] + w * xs[hi]
