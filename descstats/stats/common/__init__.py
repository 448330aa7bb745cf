"""
Generic order-statistic helpers shared by the engine.
"""

from descstats.stats.common.order import (
    hinge_halves,
    interpolated_percentile,
    median_of_sorted,
    midpoint,
    tukey_hinges,
)

__all__ = [
    "hinge_halves",
    "interpolated_percentile",
    "median_of_sorted",
    "midpoint",
    "tukey_hinges",
]
