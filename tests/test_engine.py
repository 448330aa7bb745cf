"""Tests for StatsEngine measures and their error contracts."""
import math

import pytest

from descstats.core.errors import DomainError, InvalidInput
from descstats.stats.engine import StatsEngine


# ---------- Construction ----------

def test_construction_counts_numeric_entries():
    e = StatsEngine([1, "a", 2.5, None, 3])
    assert e.n == 3
    assert len(e) == 3
    assert e.values == (1.0, 2.5, 3.0)
    assert e.sample.dropped == 2


def test_construction_fails_without_numbers():
    with pytest.raises(InvalidInput):
        StatsEngine([])
    with pytest.raises(InvalidInput):
        StatsEngine(["x", "y"])


def test_values_keep_input_order_after_sorting_queries():
    e = StatsEngine([3, 1, 2])
    e.median()
    e.quartiles()
    e.percentile(50)
    assert e.values == (3.0, 1.0, 2.0)


def test_from_sample_shares_sample(dispersion_engine):
    e = StatsEngine.from_sample(dispersion_engine.sample)
    assert e.sample is dispersion_engine.sample
    assert e.mean() == dispersion_engine.mean()


def test_repr():
    assert repr(StatsEngine([1, "x"])) == "StatsEngine(n=1, dropped=1)"


# ---------- Mean / median / mode ----------

def test_mean():
    assert StatsEngine([8, 12, 10, 15]).mean() == 11.25
    assert StatsEngine([42]).mean() == 42.0


def test_median_odd_and_even():
    assert StatsEngine([7, 12, 9, 15, 10]).median() == 10.0
    assert StatsEngine([1, 3, 2, 4]).median() == 2.5


@pytest.mark.parametrize(
    "data, expected",
    [
        ([4, 7, 4, 9, 7, 7, 3], [7.0]),
        ([2, 3, 2, 3, 4], [2.0, 3.0]),
        ([10, 11, 12], []),
        ([42], []),
        ([5, 5], [5.0]),
        ([3, 1, 3, 1, 2, 2], [1.0, 2.0, 3.0]),
    ],
)
def test_mode(data, expected):
    assert StatsEngine(data).mode() == expected


def test_mode_merges_int_and_float_spellings():
    assert StatsEngine([2, 2.0, 3]).mode() == [2.0]


# ---------- Geometric / harmonic / trimmed means ----------

def test_geometric_mean():
    assert StatsEngine([4, 1]).geometric_mean() == 2.0


def test_geometric_mean_is_stable_for_large_values():
    # The direct product overflows a float; the log-domain form does not.
    e = StatsEngine([1e200] * 4)
    assert e.geometric_mean() == pytest.approx(1e200)


@pytest.mark.parametrize("data", [[5, 0, 2], [3, -1, 4]])
def test_geometric_mean_requires_positive(data):
    with pytest.raises(DomainError, match="positive") as excinfo:
        StatsEngine(data).geometric_mean()
    assert excinfo.value.operation == "geometric_mean"


def test_harmonic_mean():
    assert StatsEngine([2, 6]).harmonic_mean() == 3.0


def test_harmonic_mean_requires_positive():
    with pytest.raises(DomainError, match="positive"):
        StatsEngine([5, 0, 10]).harmonic_mean()


def test_trimmed_mean():
    assert StatsEngine([1, 2, 3, 100]).trimmed_mean(25.0) == 2.5


def test_trimmed_mean_zero_percent_is_mean():
    e = StatsEngine([4, 6, 10])
    assert e.trimmed_mean(0.0) == e.mean()


def test_trimmed_mean_small_dataset_falls_back_to_mean():
    assert StatsEngine([1, 9]).trimmed_mean(40.0) == 5.0


def test_trimmed_mean_rounds_trim_count_down():
    # 10% of 5 values trims floor(0.5) == 0 per tail
    e = StatsEngine([1, 2, 3, 4, 100])
    assert e.trimmed_mean(10.0) == e.mean()


@pytest.mark.parametrize("percent", [-1.0, 50.0, 60.0, float("nan"), "10"])
def test_trimmed_mean_rejects_out_of_range_percent(percent):
    with pytest.raises(DomainError):
        StatsEngine([1, 2, 3, 4]).trimmed_mean(percent)


def test_trimmed_mean_checks_percent_before_size():
    with pytest.raises(DomainError):
        StatsEngine([1]).trimmed_mean(75.0)


# ---------- Range / quartiles / IQR ----------

def test_range():
    assert StatsEngine([4, 7, 1, 9, 5]).range() == 8.0
    assert StatsEngine([42]).range() == 0.0


def test_quartiles_and_iqr():
    e = StatsEngine([6, 47, 49, 15, 42, 41, 7, 39, 43, 40])
    assert e.quartiles() == (15.0, 40.5, 43.0)
    assert e.iqr() == 28.0


def test_quartiles_odd_count_excludes_median_from_halves():
    # halves are [1, 2, 3] and [5, 6, 7]
    assert StatsEngine([7, 1, 4, 6, 2, 5, 3]).quartiles() == (2.0, 4.0, 6.0)


def test_quartiles_two_values():
    assert StatsEngine([3, 1]).quartiles() == (1.0, 2.0, 3.0)


def test_quartiles_single_value():
    e = StatsEngine([5])
    assert e.quartiles() == (5.0, 5.0, 5.0)
    assert e.iqr() == 0.0


def test_quartiles_median_agrees_with_median():
    for data in ([1], [1, 2], [5, 1, 4], [9, 2, 7, 3], [1, 1, 2, 3, 5, 8, 13]):
        e = StatsEngine(data)
        assert e.quartiles()[1] == e.median()


# ---------- Variance / std dev / SEM / MAD ----------

def test_population_variance(dispersion_engine):
    assert dispersion_engine.variance(sample=False) == 4.0


def test_sample_variance(dispersion_engine):
    assert dispersion_engine.variance(sample=True) == pytest.approx(4.57142857, abs=1e-7)


def test_variance_defaults_to_population(dispersion_engine):
    assert dispersion_engine.variance() == dispersion_engine.variance(sample=False)


def test_single_value_variance(single_engine):
    assert single_engine.variance(sample=False) == 0.0
    with pytest.raises(DomainError, match="at least two"):
        single_engine.variance(sample=True)


def test_standard_deviation(dispersion_engine):
    assert dispersion_engine.standard_deviation(sample=False) == 2.0
    assert dispersion_engine.standard_deviation(sample=True) == pytest.approx(
        2.138089935, abs=1e-9
    )


def test_standard_deviation_propagates_domain_error(single_engine):
    with pytest.raises(DomainError) as excinfo:
        single_engine.standard_deviation(sample=True)
    assert excinfo.value.operation == "standard_deviation"
    assert single_engine.standard_deviation(sample=False) == 0.0


def test_standard_error(dispersion_engine):
    expected = 2.138089935 / math.sqrt(8)
    assert dispersion_engine.standard_error() == pytest.approx(expected, abs=1e-9)


def test_standard_error_requires_two_values(single_engine):
    with pytest.raises(DomainError) as excinfo:
        single_engine.standard_error()
    assert excinfo.value.operation == "standard_error"


def test_mean_absolute_deviation(dispersion_engine, single_engine):
    assert dispersion_engine.mean_absolute_deviation() == 1.5
    assert single_engine.mean_absolute_deviation() == 0.0


# ---------- Percentile / min / max ----------

def test_percentile_interpolates():
    assert StatsEngine([10, 20, 30, 40]).percentile(25.0) == 17.5
    assert StatsEngine([15, 20, 35, 40, 50]).percentile(40.0) == pytest.approx(29.0)


def test_percentile_exact_rank():
    assert StatsEngine([15, 20, 35, 40, 50]).percentile(25.0) == 20.0


def test_percentile_bounds():
    e = StatsEngine([3, 6, 9])
    assert e.percentile(0.0) == 3.0
    assert e.percentile(100.0) == 9.0


def test_percentile_accepts_integers():
    assert StatsEngine([3, 6, 9]).percentile(50) == 6.0


@pytest.mark.parametrize("p", [-0.1, 100.5, 120.0, float("nan"), float("inf"), None])
def test_percentile_rejects_invalid_p(p):
    with pytest.raises(DomainError) as excinfo:
        StatsEngine([1, 2, 3]).percentile(p)
    assert excinfo.value.operation == "percentile"


def test_percentile_single_value():
    e = StatsEngine([7])
    assert [e.percentile(p) for p in (0, 33.3, 50, 100)] == [7.0, 7.0, 7.0, 7.0]


def test_min_max():
    e = StatsEngine([4, 7, 1, 9, 5])
    assert e.min_value() == 1.0
    assert e.max_value() == 9.0


def test_min_max_single_value(single_engine):
    assert single_engine.min_value() == 42.0
    assert single_engine.max_value() == 42.0


# ---------- Cross-consistency / idempotence ----------

DATASETS = [
    [42],
    [3, 1],
    [6, 47, 49, 15, 42, 41, 7, 39, 43, 40],
    [2, 4, 4, 4, 5, 5, 7, 9],
    [0.5, -3.25, 8, 8, 1e-3, 12.75, -0.5],
    [1.7e308, 1.7e308],
    [-1.7e308, 1.0, 1.7e308, 1.7e308],
]


@pytest.mark.parametrize("data", DATASETS)
def test_percentile_agrees_with_order_statistics(data):
    e = StatsEngine(data)
    assert e.percentile(0) == e.min_value()
    assert e.percentile(100) == e.max_value()
    assert e.percentile(50) == pytest.approx(e.median())


@pytest.mark.parametrize("data", DATASETS)
def test_derived_measures_are_consistent(data):
    e = StatsEngine(data)
    q1, _, q3 = e.quartiles()
    assert e.iqr() == q3 - q1
    assert e.standard_deviation(False) == math.sqrt(e.variance(False))
    if e.n >= 2:
        assert e.standard_deviation(True) == math.sqrt(e.variance(True))
    assert e.range() == e.max_value() - e.min_value()
    assert e.min_value() <= q1 <= e.median() <= q3 <= e.max_value()


@pytest.mark.parametrize("data", DATASETS)
def test_queries_are_idempotent(data):
    e = StatsEngine(data)
    queries = [
        e.mean,
        e.median,
        e.mode,
        e.range,
        e.quartiles,
        e.iqr,
        e.variance,
        e.mean_absolute_deviation,
        lambda: e.percentile(37.5),
        lambda: e.trimmed_mean(10.0),
        e.min_value,
        e.max_value,
    ]
    first = [q() for q in queries]
    second = [q() for q in queries]
    assert first == second
    assert e.values == tuple(float(x) for x in data)


def test_from_sample_engine_sees_a_frozen_copy():
    from descstats.core.sample import Sample

    raw = [3.0, 1.0, 2.0]
    e = StatsEngine.from_sample(Sample(values=raw))
    median = e.median()
    raw.append(100.0)
    assert e.n == 3
    assert e.mean() == 2.0
    assert e.median() == median


def test_median_of_huge_values_matches_percentile():
    e = StatsEngine([1.7e308, 1.7e308])
    assert e.median() == 1.7e308
    assert e.percentile(50) == e.median()
    assert e.quartiles() == (1.7e308, 1.7e308, 1.7e308)
