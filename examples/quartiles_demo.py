"""Tukey-hinge quartiles and the interquartile range."""

import json

from descstats import StatsEngine

data = [6, 47, 49, 15, 42, 41, 7, 39, 43, 40]
stats = StatsEngine(data)

q1, q2, q3 = stats.quartiles()

print("Data (json):", json.dumps(data))
print(f"Q1: {q1}  Q2 (median): {q2}  Q3: {q3}")
print("IQR:", stats.iqr())  # 28.0
