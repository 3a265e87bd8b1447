"""
ChartRenderer Port - Interface for drawing history and forecast.
"""

from abc import ABC, abstractmethod
from typing import Any

from followcast.core.domain.result import ForecastPoint, ObservationSeries


class ChartRenderer(ABC):
    """Abstract interface for forecast charts."""

    @abstractmethod
    def render(
        self,
        series: ObservationSeries,
        points: list[ForecastPoint],
        title: str,
    ) -> Any:
        """
        Draw the observed series and the forecast with its confidence band.

        Returns:
            The figure object of the plotting backend
        """
        ...
