"""
Tests for the matplotlib renderer and ACF/PACF diagnostics.
"""
from datetime import timedelta

import pytest
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

from followcast.adapters.plotting.diagnostics import max_lags, plot_diagnostics
from followcast.adapters.plotting.matplotlib_renderer import MatplotlibRenderer
from followcast.core.domain.errors import InvalidArgumentError
from followcast.core.domain.result import ForecastPoint, ObservationSeries
from followcast.core.domain.settings import PlotConfig


@pytest.fixture
def points(hourly_series):
    start = hourly_series.end_time
    return [
        ForecastPoint(
            timestamp=start + timedelta(hours=i + 1),
            value=200.0 + i,
            lower_bound=190.0 + i,
            upper_bound=210.0 + i,
        )
        for i in range(6)
    ]


def test_render_draws_history_forecast_and_band(hourly_series, points):
    fig = MatplotlibRenderer().render(hourly_series, points, "Forecast")

    assert isinstance(fig, Figure)
    (ax,) = fig.axes
    assert ax.get_title() == "Forecast"
    assert ax.get_xlabel() == "Date"
    assert ax.get_ylabel() == "Active followers"

    history, forecast = ax.get_lines()
    assert len(history.get_xdata()) == 144
    assert len(forecast.get_ydata()) == 6
    assert any(isinstance(c, PolyCollection) for c in ax.collections)


def test_render_without_bounds_has_no_band(hourly_series):
    bare = [ForecastPoint(timestamp=hourly_series.end_time + timedelta(hours=1), value=1.0)]
    fig = MatplotlibRenderer().render(hourly_series, bare, "t")
    assert not any(isinstance(c, PolyCollection) for c in fig.axes[0].collections)


def test_render_trims_history_and_saves(hourly_series, points, tmp_path):
    output = tmp_path / "charts" / "forecast.png"
    renderer = MatplotlibRenderer.from_config(
        PlotConfig(history_points=24, output_path=str(output), style="default")
    )

    fig = renderer.render(hourly_series, points, "t")

    assert len(fig.axes[0].get_lines()[0].get_xdata()) == 24
    assert output.exists()


def test_diagnostics_has_acf_and_pacf(hourly_series, tmp_path):
    output = tmp_path / "diag.png"
    fig = plot_diagnostics(hourly_series, lags=30, output_path=output)

    titles = [ax.get_title() for ax in fig.axes]
    assert titles == ["ACF - Active followers", "PACF - Active followers"]
    assert output.exists()


def test_diagnostics_caps_lags(hourly_series):
    short = ObservationSeries(values=hourly_series.values[:20], start_time=hourly_series.start_time)
    fig = plot_diagnostics(short, lags=48)
    assert len(fig.axes) == 2


def test_max_lags():
    assert max_lags(144, 48) == 48
    assert max_lags(20, 48) == 9
    assert max_lags(4, 10) == 1


def test_diagnostics_needs_observations(hourly_series):
    tiny = ObservationSeries(values=[1.0, 2.0, 3.0], start_time=hourly_series.start_time)
    with pytest.raises(InvalidArgumentError):
        plot_diagnostics(tiny)
