import pytest

from descstats.stats.engine import StatsEngine


@pytest.fixture
def dispersion_data():
    """Classic textbook dataset: mean 5, population variance 4."""
    return [2, 4, 4, 4, 5, 5, 7, 9]


@pytest.fixture
def dispersion_engine(dispersion_data):
    return StatsEngine(dispersion_data)


@pytest.fixture
def single_engine():
    return StatsEngine([42])
