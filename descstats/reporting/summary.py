"""
descstats.reporting.summary
===========================

A one-row-per-measure summary of a StatsEngine, as plain rows or a Polars
DataFrame.

Measures that are undefined for the dataset (a geometric mean over
non-positive values, a sample variance of one value, ...) do not abort the
report: their row carries a null value and the violated condition.

Examples
--------
>>> from descstats.stats.engine import StatsEngine
>>> from descstats.reporting.summary import SummaryReporter
>>> rep = SummaryReporter(StatsEngine([5, 0, 2]))
>>> d = rep.as_dict()
>>> d["mean"], d["geometric_mean"]
(2.3333333333333335, None)
>>> rep.table().columns
['measure', 'value', 'error']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

import polars as pl

from descstats.core.errors import DomainError
from descstats.core.logging import get_logger
from descstats.core.names import Measure
from descstats.core.sample import as_finite_real

if TYPE_CHECKING:
    from descstats.stats.engine import StatsEngine

log = get_logger("summary")

SUMMARY_SCHEMA = {"measure": pl.Utf8, "value": pl.Float64, "error": pl.Utf8}


@dataclass
class SummaryReporter:
    """
    Summary view over a StatsEngine.

    Attributes:
        engine: The engine to summarize
        trim_percent: Per-tail trim used for the trimmed mean row
        percentiles: Extra percentile rows (``p05``, ``p95``, ...) to append
        sample: Use sample (n-1) rather than population dispersion
    """

    engine: "StatsEngine"
    trim_percent: float = 10.0
    percentiles: Sequence[float] = (5.0, 95.0)
    sample: bool = True

    def __post_init__(self) -> None:
        checked = []
        for p in self.percentiles:
            x = as_finite_real(p)
            if x is None:
                raise ValueError(f"percentiles must be finite numbers, got {p!r}")
            checked.append(x)
        self.percentiles = tuple(checked)

    def _measures(self) -> Dict[Measure, Callable[[], Optional[float]]]:
        e = self.engine
        return {
            Measure.COUNT: lambda: float(e.n),
            Measure.MEAN: e.mean,
            Measure.MEDIAN: e.median,
            Measure.MODE: lambda: min(e.mode(), default=None),
            Measure.GEOMETRIC_MEAN: e.geometric_mean,
            Measure.HARMONIC_MEAN: e.harmonic_mean,
            Measure.TRIMMED_MEAN: lambda: e.trimmed_mean(self.trim_percent),
            Measure.RANGE: e.range,
            Measure.IQR: e.iqr,
            Measure.VARIANCE: lambda: e.variance(self.sample),
            Measure.STANDARD_DEVIATION: lambda: e.standard_deviation(self.sample),
            Measure.STANDARD_ERROR: e.standard_error,
            Measure.MEAN_ABSOLUTE_DEVIATION: e.mean_absolute_deviation,
            Measure.MIN: e.min_value,
            Measure.Q1: lambda: e.quartiles()[0],
            Measure.Q2: lambda: e.quartiles()[1],
            Measure.Q3: lambda: e.quartiles()[2],
            Measure.MAX: e.max_value,
        }

    def rows(self) -> List[Dict[str, Any]]:
        """
        Return one ``{"measure", "value", "error"}`` dict per measure.

        The mode row holds the smallest modal value (null when no value
        repeats); `modes` gives the full list.
        """
        out: List[Dict[str, Any]] = []
        for measure, compute in self._measures().items():
            out.append(self._row(measure.value, compute))
        for p in self.percentiles:
            out.append(
                self._row(
                    percentile_label(p), lambda p=p: self.engine.percentile(p)
                )
            )
        return out

    def _row(self, name: str, compute: Callable[[], Optional[float]]) -> Dict[str, Any]:
        try:
            return {"measure": name, "value": compute(), "error": None}
        except DomainError as e:
            log.debug("summary.measure_undefined", measure=name, condition=e.condition)
            return {"measure": name, "value": None, "error": e.condition}

    def modes(self) -> List[float]:
        return self.engine.mode()

    def as_dict(self) -> Dict[str, Optional[float]]:
        """Return ``{measure: value}``; undefined measures map to None."""
        return {row["measure"]: row["value"] for row in self.rows()}

    def table(self) -> pl.DataFrame:
        """Return the summary as a DataFrame with measure, value and error columns."""
        return pl.DataFrame(self.rows(), schema=SUMMARY_SCHEMA)

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            value = "—" if row["value"] is None else f"{row['value']:,.4f}"
            note = f"  ({row['error']})" if row["error"] else ""
            lines.append(f"{row['measure']:<24}{value}{note}")
        return "\n".join(lines)


def percentile_label(p: float) -> str:
    """Row label for a percentile.

    >>> percentile_label(5.0), percentile_label(97.5)
    ('p05', 'p97.5')
    """
    if float(p).is_integer():
        return f"p{int(p):02d}"
    return f"p{p:g}"
