"""
descstats.backends.polars.io
============================

Pluggable **sources** that load one numeric column into a StatsEngine.

- In-memory Series / DataFrame column
- CSV file, Parquet file

This module contains no statistics—just I/O. Nulls in a column are handed to
ingestion like any other non-numeric entry, so the ingestion policy decides
whether they are dropped or rejected.

Doctest (smoke):
>>> import polars as pl
>>> from descstats.backends.polars.io import SeriesSource, engine_from_source
>>> engine_from_source(SeriesSource(pl.Series("x", [1.0, None, 3.0]))).mean()
2.0
>>> ParquetColumnSource("_tmp.parquet", "x").read()  # doctest: +SKIP
"""

from __future__ import annotations
from typing import Optional, Protocol

import polars as pl

from descstats.core.sample import IngestConfig
from descstats.stats.engine import StatsEngine


class ColumnSource(Protocol):
    """A read-only source: storage -> Series."""
    def read(self) -> pl.Series: ...


class SeriesSource:
    def __init__(self, series: pl.Series) -> None:
        self.series = series
    def read(self) -> pl.Series:
        return self.series


class FrameColumnSource:
    def __init__(self, df: pl.DataFrame, column: str) -> None:
        self.df = df
        self.column = column
    def read(self) -> pl.Series:
        return self.df.get_column(self.column)


class CsvColumnSource:
    def __init__(self, path: str, column: str) -> None:
        self.path = path
        self.column = column
    def read(self) -> pl.Series:
        return pl.read_csv(self.path, columns=[self.column]).get_column(self.column)


class ParquetColumnSource:
    def __init__(self, path: str, column: str) -> None:
        self.path = path
        self.column = column
    def read(self) -> pl.Series:
        return pl.read_parquet(self.path, columns=[self.column]).get_column(self.column)


def engine_from_source(
    source: ColumnSource, config: Optional[IngestConfig] = None
) -> StatsEngine:
    """Read the source's column and build a StatsEngine from its values."""
    return StatsEngine(source.read().to_list(), config)


def engine_from_frame(
    df: pl.DataFrame, column: str, config: Optional[IngestConfig] = None
) -> StatsEngine:
    """Build a StatsEngine from one column of an in-memory DataFrame."""
    return engine_from_source(FrameColumnSource(df, column), config)
