"""
ModelEngine Port - Interface for seasonal ARIMA estimation and forecasting.
"""

from abc import ABC, abstractmethod

from followcast.core.domain.result import ForecastResult, ObservationSeries
from followcast.core.domain.settings import SarimaOrder


class ModelEngine(ABC):
    """
    Abstract interface for a fit-then-forecast model.

    Implementations return point estimates and standard errors only;
    interval construction happens in the core.
    """

    @abstractmethod
    def fit(self, series: ObservationSeries, orders: SarimaOrder) -> None:
        """
        Estimate the model on past observations.

        Args:
            series: Observations to fit on
            orders: Non-seasonal and seasonal orders

        Raises:
            InsufficientDataError: if the series is too short for the orders
        """
        ...

    @abstractmethod
    def forecast(self, horizon: int) -> ForecastResult:
        """
        Forecast `horizon` steps past the end of the fitted series.

        Returns:
            ForecastResult whose first step index equals the fitted series length
        """
        ...


class OrderSuggester(ABC):
    """
    Abstract interface for automatic order search.

    Suggestions are informational; the run always fits the configured orders.
    """

    @abstractmethod
    def suggest(self, series: ObservationSeries, seasonal_period: int) -> SarimaOrder:
        """Return the orders the search considers best for `series`."""
        ...
