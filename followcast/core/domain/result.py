"""
Result Domain Models - Data structures for series, forecasts and intervals.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from followcast.core.domain.settings import SarimaOrder


@dataclass(frozen=True)
class ObservationSeries:
    """Equally spaced, gap-free observations starting at `start_time`."""

    values: tuple[float, ...]
    start_time: datetime
    spacing: timedelta = timedelta(hours=1)
    name: str = "y"

    def __post_init__(self):
        # Freeze whatever sequence was passed in
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=float)

    def timestamps(self) -> list[datetime]:
        """Wall-clock time of every observation."""
        return [self.start_time + i * self.spacing for i in range(len(self.values))]

    @property
    def end_time(self) -> datetime:
        """Timestamp of the last observation."""
        return self.start_time + (len(self.values) - 1) * self.spacing


@dataclass(frozen=True)
class ForecastStep:
    """One forecast step: absolute series index, point estimate, standard error."""

    index: int
    mean: float
    std_error: float


@dataclass
class ForecastResult:
    """Ordered forecast steps immediately following the observed series."""

    steps: list[ForecastStep] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def indices(self) -> list[int]:
        return [s.index for s in self.steps]

    @property
    def means(self) -> list[float]:
        return [s.mean for s in self.steps]

    @property
    def std_errors(self) -> list[float]:
        return [s.std_error for s in self.steps]


@dataclass(frozen=True)
class ConfidenceInterval:
    """Symmetric bounds around a point estimate at a given confidence level."""

    lower: float
    upper: float
    level: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


@dataclass
class ForecastPoint:
    """A single forecast point with optional uncertainty bounds."""

    timestamp: datetime
    value: float
    lower_bound: float | None = None
    upper_bound: float | None = None


@dataclass
class RunResult:
    """Everything a single pipeline run produced."""

    series: ObservationSeries
    forecast: ForecastResult
    intervals: list[ConfidenceInterval]
    points: list[ForecastPoint]
    figure: Any = None  # matplotlib Figure
    diagnostics_figure: Any = None
    suggested_order: "SarimaOrder | None" = None
