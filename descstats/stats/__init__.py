"""
Statistical computations.

1. **Common** (descstats.stats.common):
   Dataset-agnostic helpers over sorted sequences (medians, Tukey hinges,
   interpolated percentiles).

2. **Engine** (descstats.stats.engine):
   `StatsEngine`, which applies the common helpers to a validated sample and
   enforces the domain of every measure.

Example:
--------
>>> from descstats.stats.common.order import median_of_sorted
>>> median_of_sorted([1.0, 3.0, 5.0])
3.0

>>> from descstats.stats.engine import StatsEngine
>>> StatsEngine([1, 3, 2, 4]).median()
2.5
"""
