"""
Tests for mapping forecast steps onto timestamps.
"""
from datetime import datetime, timedelta

import pytest

from followcast.core.domain.errors import InvalidArgumentError
from followcast.core.domain.result import (
    ConfidenceInterval,
    ForecastResult,
    ForecastStep,
    ObservationSeries,
)
from followcast.core.services.alignment import align_timestamps, step_timestamp, to_forecast_points

START = datetime(2024, 1, 1, 0, 0)


def _forecast(start_index: int, n: int) -> ForecastResult:
    return ForecastResult(steps=[
        ForecastStep(index=start_index + i, mean=float(i), std_error=1.0) for i in range(n)
    ])


@pytest.mark.parametrize("k", [0, 1, 23, 48, 1000])
def test_step_k_is_k_hours_after_start(k):
    assert step_timestamp(START, k) == START + timedelta(hours=k)


def test_consecutive_steps_one_hour_apart():
    stamps = align_timestamps(range(100, 148), START)
    gaps = {b - a for a, b in zip(stamps, stamps[1:])}
    assert gaps == {timedelta(hours=1)}
    assert len(set(stamps)) == len(stamps)


def test_offset_is_added():
    offset = timedelta(minutes=1440)
    assert step_timestamp(START, 5, offset=offset) == START + timedelta(days=1, hours=5)


def test_custom_spacing():
    assert step_timestamp(START, 3, spacing=timedelta(minutes=15)) == START + timedelta(minutes=45)


def test_negative_index_rejected():
    with pytest.raises(InvalidArgumentError):
        step_timestamp(START, -1)


def test_points_continue_after_last_observation():
    series = ObservationSeries(values=[1.0] * 10, start_time=START)
    forecast = _forecast(start_index=10, n=3)

    points = to_forecast_points(series, forecast)

    assert points[0].timestamp == series.end_time + timedelta(hours=1)
    assert [p.value for p in points] == [0.0, 1.0, 2.0]
    assert points[0].lower_bound is None


def test_points_carry_bounds():
    series = ObservationSeries(values=[1.0, 2.0], start_time=START)
    forecast = _forecast(start_index=2, n=2)
    intervals = [
        ConfidenceInterval(lower=-1.0, upper=1.0, level=0.9),
        ConfidenceInterval(lower=0.0, upper=2.0, level=0.9),
    ]

    points = to_forecast_points(series, forecast, intervals)

    assert (points[1].lower_bound, points[1].upper_bound) == (0.0, 2.0)
    assert points[1].timestamp == START + timedelta(hours=3)


def test_interval_count_must_match():
    series = ObservationSeries(values=[1.0], start_time=START)
    with pytest.raises(InvalidArgumentError):
        to_forecast_points(series, _forecast(1, 2), [ConfidenceInterval(0.0, 1.0, 0.95)])
