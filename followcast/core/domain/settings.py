"""
Settings Domain Model - Configuration for a single forecasting run.

Uses Pydantic for validation. Defaults reproduce the hourly follower-activity
analysis: 48 steps ahead, 95% bands, daily (24h) seasonality.
"""

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class SarimaOrder(BaseModel):
    """Non-seasonal (p, d, q) and seasonal (P, D, Q, s) orders."""

    order: tuple[int, int, int] = (1, 1, 1)
    seasonal_order: tuple[int, int, int, int] = (1, 1, 1, 24)

    @field_validator("order", "seasonal_order")
    @classmethod
    def _non_negative(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(v < 0 for v in value):
            raise ValueError(f"Orders must be non-negative, got {value}")
        return value

    @model_validator(mode="after")
    def _check_period(self) -> "SarimaOrder":
        P, D, Q, s = self.seasonal_order
        if (P or D or Q) and s < 2:
            raise ValueError(f"Seasonal period must be >= 2 when seasonal terms are set, got {s}")
        return self

    @property
    def seasonal_period(self) -> int:
        return self.seasonal_order[3]

    def min_observations(self) -> int:
        """Smallest series length statsmodels can estimate these orders on."""
        p, d, q = self.order
        P, D, Q, s = self.seasonal_order
        if P or D or Q:
            return 2 * s + d + D * s + 1
        return d + 2

    def __str__(self) -> str:
        return f"SARIMA{self.order}x{self.seasonal_order}"


class DataConfig(BaseModel):
    """Where the observations come from."""

    csv_path: str = "followers.csv"
    value_column: str = "Active followers"
    timestamp_column: str | None = None
    start_time: datetime = datetime(2024, 1, 1)
    spacing_minutes: int = Field(default=60, gt=0)
    max_rows: int | None = Field(default=None, gt=0)

    @property
    def spacing(self) -> timedelta:
        return timedelta(minutes=self.spacing_minutes)


class ModelConfig(BaseModel):
    """Configuration for the SARIMA engine."""

    orders: SarimaOrder = Field(default_factory=SarimaOrder)
    enforce_stationarity: bool = False
    enforce_invertibility: bool = False
    maxiter: int = Field(default=200, gt=0)


class IntervalConfig(BaseModel):
    """Forecast horizon and confidence band."""

    horizon: int = Field(default=48, ge=1)
    confidence_level: float = Field(default=0.95, gt=0.0, lt=1.0)
    # Added to every forecast timestamp after index mapping
    alignment_offset_minutes: int = 0


class PlotConfig(BaseModel):
    """Configuration for the forecast chart."""

    title: str = "Active followers forecast"
    style: str = "fivethirtyeight"
    history_points: int | None = Field(default=None, gt=0)
    output_path: str | None = None
    figsize: tuple[float, float] = (14.0, 6.0)


class DiagnosticsConfig(BaseModel):
    """ACF/PACF inspection plots."""

    enabled: bool = False
    lags: int = Field(default=48, gt=0)
    output_path: str | None = None


class SuggestConfig(BaseModel):
    """Auto-fit order suggestion (logged, never applied)."""

    enabled: bool = False
    max_p: int = 3
    max_q: int = 3


class ForecastSettings(BaseModel):
    """
    Complete run configuration.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    data: DataConfig = Field(default_factory=DataConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    interval: IntervalConfig = Field(default_factory=IntervalConfig)
    plot: PlotConfig = Field(default_factory=PlotConfig)
    diagnostics: DiagnosticsConfig = Field(default_factory=DiagnosticsConfig)
    suggest: SuggestConfig = Field(default_factory=SuggestConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value
