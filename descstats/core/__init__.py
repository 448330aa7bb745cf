"""
Core building blocks: typed names, errors, ingestion and logging.

Nothing here computes a statistic; `descstats.core.sample` turns raw input
into the immutable `Sample` every engine is built on.
"""
