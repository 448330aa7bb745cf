"""
descstats.stats.engine
======================

The statistics engine: a validated, immutable sample and every descriptive
measure derived from it.

Construction is the only step that touches raw input (see
`descstats.core.sample`). After that each query is a pure function of the
stored sample; order statistics read a sorted copy that is built once on
first use and never mutated, so an engine can be shared across threads.

Error policy:

- ``InvalidInput`` at construction when nothing numeric remains.
- ``DomainError`` whenever a measure is undefined for the current data or
  argument (non-positive values for geometric/harmonic means, out-of-range
  percentages, fewer than two values for sample statistics, a trim that
  would remove everything).

Examples
--------
>>> from descstats.stats.engine import StatsEngine
>>> e = StatsEngine([2, 4, 4, 4, 5, 5, 7, 9])
>>> e.mean(), e.median(), e.mode()
(5.0, 4.5, [4.0])
>>> e.variance(), e.standard_deviation()
(4.0, 2.0)
>>> e.quartiles()
(4.0, 4.5, 6.0)
>>> e.percentile(25.0)
4.0
"""

from __future__ import annotations
import math
from collections import Counter
from functools import cached_property
from typing import Any, Iterable, List, Optional, Tuple

from descstats.core.errors import DomainError
from descstats.core.sample import IngestConfig, Sample, as_finite_real, ingest
from descstats.stats.common.order import (
    interpolated_percentile,
    median_of_sorted,
    tukey_hinges,
)


class StatsEngine:
    """
    Descriptive statistics over a finite, immutable numeric dataset.

    Args:
        data: Any iterable; only finite real numbers are kept
        config: Ingestion settings (see `IngestConfig`)

    Raises:
        InvalidInput: No numeric values were supplied

    Examples
    --------
    >>> StatsEngine([4, "n/a", 7, 1, 9, 5]).range()
    8.0
    >>> StatsEngine([10, 11, 12]).mode()
    []
    """

    def __init__(
        self, data: Iterable[Any], config: Optional[IngestConfig] = None
    ) -> None:
        self._sample = ingest(data, config)

    @classmethod
    def from_sample(cls, sample: Sample) -> "StatsEngine":
        """Wrap an existing Sample; the Sample has already validated its values."""
        engine = cls.__new__(cls)
        engine._sample = sample
        return engine

    def __repr__(self) -> str:
        return f"StatsEngine(n={self.n}, dropped={self._sample.dropped})"

    def __len__(self) -> int:
        return self.n

    # ------------------------------------------------------------------
    # Sample access
    # ------------------------------------------------------------------

    @property
    def sample(self) -> Sample:
        return self._sample

    @property
    def values(self) -> Tuple[float, ...]:
        """The retained values, in input order."""
        return self._sample.values

    @property
    def n(self) -> int:
        return len(self._sample.values)

    @cached_property
    def _sorted(self) -> Tuple[float, ...]:
        return tuple(sorted(self._sample.values))

    # ------------------------------------------------------------------
    # Central tendency
    # ------------------------------------------------------------------

    def mean(self) -> float:
        """Arithmetic mean."""
        return sum(self.values) / self.n

    def median(self) -> float:
        """Middle value; the average of the two central values for even n."""
        return median_of_sorted(self._sorted)

    def mode(self) -> List[float]:
        """
        Most frequent value(s), ascending.

        Returns an empty list when no value repeats, including the trivial
        single-value dataset. Multimodal data returns every value sharing the
        highest frequency.

        >>> StatsEngine([2, 3, 2, 3, 4]).mode()
        [2.0, 3.0]
        >>> StatsEngine([42]).mode()
        []
        """
        counts = Counter(self.values)
        max_freq = max(counts.values())
        if max_freq == 1:
            return []
        return sorted(v for v, c in counts.items() if c == max_freq)

    def geometric_mean(self) -> float:
        """
        Geometric mean, computed in the log domain: ``exp(mean(log(x)))``.

        Raises:
            DomainError: If any value is zero or negative

        >>> StatsEngine([4, 1]).geometric_mean()
        2.0
        """
        self._require_positive("geometric_mean")
        return math.exp(sum(math.log(x) for x in self.values) / self.n)

    def harmonic_mean(self) -> float:
        """
        Harmonic mean ``n / sum(1/x)``.

        Raises:
            DomainError: If any value is zero or negative

        >>> StatsEngine([2, 6]).harmonic_mean()
        3.0
        """
        self._require_positive("harmonic_mean")
        return self.n / sum(1.0 / x for x in self.values)

    def trimmed_mean(self, percent: float) -> float:
        """
        Mean after discarding ``percent`` % of the sorted values at each tail.

        ``k = floor(n * percent / 100)`` values are removed from each end.
        Datasets with fewer than three values are too small to trim and
        return the arithmetic mean.

        Args:
            percent: Share to trim from each tail, 0 <= percent < 50

        Raises:
            DomainError: If ``percent`` is out of range, or the trim would
                leave no values

        >>> StatsEngine([1, 2, 3, 100]).trimmed_mean(25.0)
        2.5
        """
        p = self._require_finite("trimmed_mean", "percent", percent)
        if p < 0.0 or p >= 50.0:
            raise DomainError(
                "trimmed_mean", f"percent must be in the range 0 <= p < 50, got {p}"
            )

        n = self.n
        if n < 3:
            return self.mean()

        k = math.floor(n * p / 100.0)
        if 2 * k >= n:
            raise DomainError(
                "trimmed_mean",
                f"trimming {k} values per tail removes all {n} values",
            )

        kept = self._sorted[k : n - k]
        return sum(kept) / len(kept)

    # ------------------------------------------------------------------
    # Spread
    # ------------------------------------------------------------------

    def range(self) -> float:
        """``max - min``; zero for a single value."""
        return self.max_value() - self.min_value()

    def quartiles(self) -> Tuple[float, float, float]:
        """
        ``(Q1, Q2, Q3)`` by Tukey's hinges.

        Q2 is the median. Q1 and Q3 are the medians of the lower and upper
        halves of the sorted data; for odd n the median itself belongs to
        neither half.

        >>> StatsEngine([6, 47, 49, 15, 42, 41, 7, 39, 43, 40]).quartiles()
        (15.0, 40.5, 43.0)
        >>> StatsEngine([5]).quartiles()
        (5.0, 5.0, 5.0)
        """
        return tukey_hinges(self._sorted)

    def iqr(self) -> float:
        """Interquartile range ``Q3 - Q1``."""
        q1, _, q3 = self.quartiles()
        return q3 - q1

    def variance(self, sample: bool = False) -> float:
        """
        Variance about the mean.

        Args:
            sample: Divide by ``n - 1`` (Bessel's correction) instead of ``n``

        Raises:
            DomainError: Sample variance of fewer than two values

        >>> e = StatsEngine([2, 4, 4, 4, 5, 5, 7, 9])
        >>> e.variance(sample=False)
        4.0
        >>> round(e.variance(sample=True), 7)
        4.5714286
        """
        n = self.n
        if sample and n < 2:
            raise DomainError(
                "variance", f"sample variance requires at least two values, got {n}"
            )
        if n == 1:
            return 0.0

        m = self.mean()
        sum_squares = sum((x - m) * (x - m) for x in self.values)
        return sum_squares / (n - 1 if sample else n)

    def standard_deviation(self, sample: bool = False) -> float:
        """Square root of `variance`; fails exactly when `variance` does."""
        try:
            return math.sqrt(self.variance(sample))
        except DomainError as e:
            raise DomainError("standard_deviation", e.condition) from e

    def standard_error(self) -> float:
        """
        Standard error of the mean: sample standard deviation over ``sqrt(n)``.

        Raises:
            DomainError: Fewer than two values
        """
        n = self.n
        if n < 2:
            raise DomainError(
                "standard_error", f"requires at least two values, got {n}"
            )
        return self.standard_deviation(sample=True) / math.sqrt(n)

    def mean_absolute_deviation(self) -> float:
        """Mean of ``|x - mean|``; zero for a single value."""
        m = self.mean()
        return sum(abs(x - m) for x in self.values) / self.n

    # ------------------------------------------------------------------
    # Order statistics
    # ------------------------------------------------------------------

    def percentile(self, p: float) -> float:
        """
        p-th percentile by linear interpolation between order statistics.

        Args:
            p: Percentile in the closed range [0, 100]

        Raises:
            DomainError: If ``p`` is outside [0, 100]

        >>> e = StatsEngine([15, 20, 35, 40, 50])
        >>> e.percentile(25), e.percentile(40)
        (20.0, 29.0)
        """
        q = self._require_finite("percentile", "p", p)
        if q < 0.0 or q > 100.0:
            raise DomainError("percentile", f"p must be in [0, 100], got {q}")
        return interpolated_percentile(self._sorted, q)

    def min_value(self) -> float:
        """Smallest value."""
        return min(self.values)

    def max_value(self) -> float:
        """Largest value."""
        return max(self.values)

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_positive(self, operation: str) -> None:
        for x in self.values:
            if x <= 0:
                raise DomainError(
                    operation, f"requires all values positive, found {x}"
                )

    @staticmethod
    def _require_finite(operation: str, name: str, value: Any) -> float:
        x = as_finite_real(value)
        if x is None:
            raise DomainError(
                operation, f"{name} must be a finite real number, got {value!r}"
            )
        return x
