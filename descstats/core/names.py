"""
descstats.core.names
====================

Typed names shared across the package.

- `Measure`: an Enum of the measures a StatsEngine can report.
- `IngestPolicy`: what ingestion does with non-numeric entries.

Examples
--------
>>> from descstats.core.names import Measure
>>> Measure.GEOMETRIC_MEAN.value
'geometric_mean'
>>> Measure("iqr") is Measure.IQR
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal


class Measure(str, Enum):
    """Measures reported by the summary table, in display order.

    Central tendency first, then spread, then order statistics.
    """

    COUNT = "count"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    GEOMETRIC_MEAN = "geometric_mean"
    HARMONIC_MEAN = "harmonic_mean"
    TRIMMED_MEAN = "trimmed_mean"
    RANGE = "range"
    IQR = "iqr"
    VARIANCE = "variance"
    STANDARD_DEVIATION = "standard_deviation"
    STANDARD_ERROR = "standard_error"
    MEAN_ABSOLUTE_DEVIATION = "mean_absolute_deviation"
    MIN = "min"
    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    MAX = "max"


IngestPolicy = Literal["drop", "raise"]
