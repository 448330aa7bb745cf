"""Means, median and mode of a small dataset."""

import json

from descstats import StatsEngine
from descstats.core.logging import configure_structlog

configure_structlog()

data = [4, 7, 4, 9, 7, 7, 3]
stats = StatsEngine(data)

print("Data (json):", json.dumps(data))
print("Mean:", stats.mean())
print("Median:", stats.median())
print("Mode:", stats.mode())  # [7.0]
print("Geometric mean:", stats.geometric_mean())
print("Harmonic mean:", stats.harmonic_mean())
print("Trimmed mean (20%):", stats.trimmed_mean(20.0))
