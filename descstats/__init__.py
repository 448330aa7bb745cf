"""
descstats — descriptive statistics over small, immutable numeric datasets.

A dataset is validated once, when a `StatsEngine` is built from it; from then
on every measure (means, median, mode, quartiles, percentiles, dispersion)
is a pure read over the stored sample. Measures that are undefined for the
data at hand fail loudly with `DomainError` instead of returning a sentinel.

Example
-------
>>> import descstats
>>> e = descstats.StatsEngine([8, 12, 10, 15])
>>> e.mean()
11.25
>>> assert hasattr(descstats, "core")
>>> assert hasattr(descstats, "stats")
"""

import logging

from descstats import core, stats
from descstats.core.errors import DomainError, InvalidInput, InvariantError, StatsError
from descstats.core.names import Measure
from descstats.core.sample import IngestConfig, Sample, ingest
from descstats.stats.engine import StatsEngine

logging.getLogger("descstats").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DomainError",
    "IngestConfig",
    "InvalidInput",
    "InvariantError",
    "Measure",
    "Sample",
    "StatsEngine",
    "StatsError",
    "ingest",
]
