"""
Forecast alignment - map forecast step indices onto wall-clock time.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from followcast.core.domain.errors import InvalidArgumentError
from followcast.core.domain.result import (
    ConfidenceInterval,
    ForecastPoint,
    ForecastResult,
    ObservationSeries,
)


def step_timestamp(
    start_time: datetime,
    index: int,
    spacing: timedelta = timedelta(hours=1),
    offset: timedelta = timedelta(0),
) -> datetime:
    """Timestamp of absolute series position `index`."""
    if index < 0:
        raise InvalidArgumentError(f"Step index must be >= 0, got {index}")
    return start_time + index * spacing + offset


def align_timestamps(
    indices: Sequence[int],
    start_time: datetime,
    spacing: timedelta = timedelta(hours=1),
    offset: timedelta = timedelta(0),
) -> list[datetime]:
    return [step_timestamp(start_time, i, spacing, offset) for i in indices]


def to_forecast_points(
    series: ObservationSeries,
    forecast: ForecastResult,
    intervals: Sequence[ConfidenceInterval] | None = None,
    offset: timedelta = timedelta(0),
) -> list[ForecastPoint]:
    """
    Combine forecast steps, their bounds and timestamps into plot-ready points.

    With a zero offset the first point falls one spacing after the series'
    last observation.
    """
    if intervals is not None and len(intervals) != len(forecast):
        raise InvalidArgumentError(
            f"Got {len(intervals)} intervals for {len(forecast)} forecast steps"
        )

    timestamps = align_timestamps(forecast.indices, series.start_time, series.spacing, offset)
    points = []
    for i, (ts, step) in enumerate(zip(timestamps, forecast.steps)):
        ci = intervals[i] if intervals is not None else None
        points.append(ForecastPoint(
            timestamp=ts,
            value=step.mean,
            lower_bound=ci.lower if ci else None,
            upper_bound=ci.upper if ci else None,
        ))
    return points
