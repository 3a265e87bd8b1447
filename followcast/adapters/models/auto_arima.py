"""
Auto ARIMA Suggester - Stepwise order search using pmdarima.

Requires the optional 'pmdarima' package.
"""

import logging

try:
    import pmdarima as pm
except ImportError:
    pm = None

from followcast.core.domain.result import ObservationSeries
from followcast.core.domain.settings import SarimaOrder, SuggestConfig
from followcast.core.ports.model_engine import OrderSuggester

logger = logging.getLogger(__name__)


class AutoArimaSuggester(OrderSuggester):
    """
    Suggest SARIMA orders with `pmdarima.auto_arima`.
    """

    def __init__(self, max_p: int = 3, max_q: int = 3):
        if pm is None:
            raise ImportError(
                "pmdarima not found. Please install with: pip install 'followcast[auto]'"
            )
        self.max_p = max_p
        self.max_q = max_q

    @classmethod
    def from_config(cls, config: SuggestConfig) -> "AutoArimaSuggester":
        return cls(max_p=config.max_p, max_q=config.max_q)

    def suggest(self, series: ObservationSeries, seasonal_period: int) -> SarimaOrder:
        logger.info(f"Searching orders with auto_arima (m={seasonal_period})...")
        model = pm.auto_arima(
            series.as_array(),
            seasonal=seasonal_period > 1,
            m=seasonal_period if seasonal_period > 1 else 1,
            max_p=self.max_p,
            max_q=self.max_q,
            stepwise=True,
            suppress_warnings=True,
            error_action="ignore",
        )
        return SarimaOrder(
            order=tuple(model.order),
            seasonal_order=tuple(model.seasonal_order),
        )
