"""Shared fixtures for the seirahd test suite."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from seirahd import SEIRAHDParams


@pytest.fixture
def example_param():
    return np.array([1000, 0.5, 0.2, 0.6, 0.1, 0.05, 0.01, 0.3])


@pytest.fixture
def example_state():
    return np.array([990, 5, 3, 2, 0, 0, 0, 0], dtype=float)


@pytest.fixture
def small_params():
    return SEIRAHDParams(N0=1000)
