"""
Tabular views over a StatsEngine.
"""
