"""
Forecast Run Service - The single linear pipeline of followcast.

This service orchestrates one synchronous pass:
1. Load the observation series
2. Optional ACF/PACF diagnostics and order suggestion
3. Fit SARIMA with the configured orders
4. Forecast, build confidence bounds, align timestamps
5. Render the chart
"""

import logging
from datetime import timedelta
from typing import Any, Callable

from followcast.core.domain.result import ObservationSeries, RunResult
from followcast.core.domain.settings import ForecastSettings
from followcast.core.ports.model_engine import ModelEngine, OrderSuggester
from followcast.core.ports.renderer import ChartRenderer
from followcast.core.ports.series_source import SeriesSource
from followcast.core.services.alignment import to_forecast_points
from followcast.core.services.intervals import intervals_for, z_score

logger = logging.getLogger(__name__)

DiagnosticsFn = Callable[[ObservationSeries, int, str | None], Any]


class ForecastRun:
    """
    Core service that executes the load-fit-forecast-plot pipeline once.
    """

    def __init__(
        self,
        source: SeriesSource,
        engine: ModelEngine,
        renderer: ChartRenderer,
        suggester: OrderSuggester | None = None,
        diagnostics: DiagnosticsFn | None = None,
    ):
        """
        Initialize the run.

        Args:
            source: Port to read observations
            engine: Port to fit and forecast
            renderer: Port to draw the result
            suggester: Optional auto-fit order search
            diagnostics: Optional ACF/PACF plotting function
        """
        self.source = source
        self.engine = engine
        self.renderer = renderer
        self.suggester = suggester
        self.diagnostics = diagnostics

    def run(self, settings: ForecastSettings) -> RunResult:
        """
        Execute the pipeline.

        Any failure is logged with the stage it happened in and re-raised.
        """
        interval = settings.interval
        orders = settings.model.orders

        # Fail on a bad level before spending time on the fit
        z = z_score(interval.confidence_level)

        stage = "load"
        try:
            series = self.source.load()
            logger.info(
                f"Loaded {len(series)} observations of '{series.name}' "
                f"from {series.start_time} to {series.end_time}"
            )

            diagnostics_figure = None
            if settings.diagnostics.enabled and self.diagnostics is not None:
                stage = "diagnostics"
                diagnostics_figure = self.diagnostics(
                    series, settings.diagnostics.lags, settings.diagnostics.output_path
                )

            suggested = None
            if settings.suggest.enabled and self.suggester is not None:
                stage = "suggest"
                suggested = self.suggester.suggest(series, orders.seasonal_period)
                logger.info(f"Auto-fit suggests {suggested}; configured orders are {orders}")

            stage = "fit"
            logger.info(f"Fitting {orders} on {len(series)} observations")
            self.engine.fit(series, orders)

            stage = "forecast"
            forecast = self.engine.forecast(interval.horizon)
            logger.info(f"Forecast {len(forecast)} steps (z={z:.4f} at {interval.confidence_level:.0%})")

            stage = "intervals"
            intervals = intervals_for(forecast, interval.confidence_level)
            points = to_forecast_points(
                series,
                forecast,
                intervals,
                offset=timedelta(minutes=interval.alignment_offset_minutes),
            )

            stage = "render"
            figure = self.renderer.render(series, points, settings.plot.title)
        except Exception as e:
            logger.error(f"Forecast run failed during '{stage}': {e}")
            raise

        if points:
            logger.info(f"Forecast covers {points[0].timestamp} to {points[-1].timestamp}")

        return RunResult(
            series=series,
            forecast=forecast,
            intervals=intervals,
            points=points,
            figure=figure,
            diagnostics_figure=diagnostics_figure,
            suggested_order=suggested,
        )
