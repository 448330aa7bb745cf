"""Range, variance, standard deviation, standard error and MAD."""

import json

from descstats import DomainError, StatsEngine

data = [2, 4, 4, 4, 5, 5, 7, 9]
stats = StatsEngine(data)

print("Data (json):", json.dumps(data))
print("Range:", stats.range())
print("Population variance:", stats.variance(sample=False))  # 4.0
print("Sample variance:", stats.variance(sample=True))
print("Population std dev:", stats.standard_deviation(sample=False))  # 2.0
print("Sample std dev:", stats.standard_deviation(sample=True))
print("Standard error:", stats.standard_error())
print("Mean absolute deviation:", stats.mean_absolute_deviation())  # 1.5

try:
    StatsEngine([10]).standard_error()
except DomainError as e:
    print("Single value:", e)
