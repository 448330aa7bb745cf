"""Linearly interpolated percentiles."""

import json

from descstats import StatsEngine

data = [15, 20, 35, 40, 50]
stats = StatsEngine(data)

print("Data (json):", json.dumps(data))
print("25th percentile:", stats.percentile(25))  # 20.0
print("40th percentile:", stats.percentile(40))  # 29.0
print("Min / max:", stats.min_value(), stats.max_value())
