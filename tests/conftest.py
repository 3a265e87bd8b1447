"""
Pytest configuration for followcast tests.
"""
from datetime import datetime

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from followcast.core.domain.result import ObservationSeries


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: Tests that fit a real SARIMA model"
    )


def make_hourly_values(days: int = 6, seed: int = 7) -> np.ndarray:
    """Daily-seasonal follower counts, strictly positive."""
    rng = np.random.default_rng(seed)
    t = np.arange(days * 24)
    return 200 + 60 * np.sin(2 * np.pi * t / 24) + rng.normal(0, 5, size=t.size)


@pytest.fixture
def hourly_series():
    return ObservationSeries(
        values=make_hourly_values(),
        start_time=datetime(2024, 1, 1),
        name="Active followers",
    )


@pytest.fixture
def followers_csv(tmp_path):
    """CSV export in the shape the loader expects."""
    values = make_hourly_values()
    df = pd.DataFrame({
        "Date": pd.date_range("2024-03-01", periods=len(values), freq="h"),
        "Active followers": values.round().astype(int),
    })
    path = tmp_path / "followers.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
