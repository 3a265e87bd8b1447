"""
Matplotlib Renderer - Forecast chart with a shaded confidence band.
"""

import logging
from pathlib import Path

import matplotlib.dates as mdates
import matplotlib.pyplot as plt

from followcast.core.domain.result import ForecastPoint, ObservationSeries
from followcast.core.domain.settings import PlotConfig
from followcast.core.ports.renderer import ChartRenderer

logger = logging.getLogger(__name__)


class MatplotlibRenderer(ChartRenderer):
    """
    Draws history, forecast line and markers, and the interval band.
    """

    def __init__(
        self,
        style: str = "fivethirtyeight",
        figsize: tuple[float, float] = (14.0, 6.0),
        history_points: int | None = None,
        output_path: str | Path | None = None,
    ):
        self.style = style
        self.figsize = figsize
        self.history_points = history_points
        self.output_path = Path(output_path) if output_path else None

    @classmethod
    def from_config(cls, config: PlotConfig) -> "MatplotlibRenderer":
        return cls(
            style=config.style,
            figsize=config.figsize,
            history_points=config.history_points,
            output_path=config.output_path,
        )

    def render(self, series: ObservationSeries, points: list[ForecastPoint], title: str):
        history_x = series.timestamps()
        history_y = list(series.values)
        if self.history_points:
            history_x = history_x[-self.history_points:]
            history_y = history_y[-self.history_points:]

        forecast_x = [p.timestamp for p in points]
        forecast_y = [p.value for p in points]

        with plt.style.context(self.style):
            fig, ax = plt.subplots(figsize=self.figsize)
            ax.plot(history_x, history_y, label="Observed", linewidth=1.5)
            ax.plot(forecast_x, forecast_y, label="Forecast", color="tab:red", linewidth=1.5)
            ax.scatter(forecast_x, forecast_y, color="tab:red", s=12, zorder=3)

            banded = [p for p in points if p.lower_bound is not None and p.upper_bound is not None]
            if banded:
                ax.fill_between(
                    [p.timestamp for p in banded],
                    [p.lower_bound for p in banded],
                    [p.upper_bound for p in banded],
                    color="tab:red",
                    alpha=0.2,
                    label="Confidence interval",
                )

            ax.set_title(title)
            ax.set_xlabel("Date")
            ax.set_ylabel(series.name)
            ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y-%m-%d %H:%M"))
            fig.autofmt_xdate()
            ax.legend(loc="upper left")
            fig.tight_layout()

        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(self.output_path)
            logger.info(f"Saved forecast chart to {self.output_path}")

        return fig
