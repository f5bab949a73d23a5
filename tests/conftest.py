"""
pytest configuration and shared fixtures.
"""

import pandas as pd
import pytest

from pysurvalgebra.expressions import Base


class FittedDistribution:
    """Stand-in for a fitted or defined distribution. Never inspected."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"FittedDistribution({self.name!r})"


@pytest.fixture
def d1():
    return Base(FittedDistribution("exp"), label="d1")


@pytest.fixture
def d2():
    return Base(FittedDistribution("weibull"), label="d2")


@pytest.fixture
def d3():
    return Base(FittedDistribution("gompertz"), label="d3")


@pytest.fixture
def handle():
    """Raw distribution handle, not yet wrapped in a leaf."""
    return FittedDistribution("llogis")


@pytest.fixture
def cohort():
    """Two-row covariate table."""
    return pd.DataFrame({"group": ["Medium", "Poor"]})
