"""
SARIMA Adapter - Seasonal ARIMA via statsmodels SARIMAX.

Fits on a RangeIndex so forecast indices continue from len(series).
"""

import logging
import warnings

import numpy as np
import pandas as pd
from statsmodels.tsa.statespace.sarimax import SARIMAX

from followcast.core.domain.errors import (
    InsufficientDataError,
    InvalidArgumentError,
    ModelNotFittedError,
)
from followcast.core.domain.result import ForecastResult, ForecastStep, ObservationSeries
from followcast.core.domain.settings import ModelConfig, SarimaOrder
from followcast.core.ports.model_engine import ModelEngine

logger = logging.getLogger(__name__)


class SarimaAdapter(ModelEngine):
    """
    Model engine backed by `statsmodels.tsa.statespace.sarimax.SARIMAX`.
    """

    def __init__(
        self,
        enforce_stationarity: bool = False,
        enforce_invertibility: bool = False,
        maxiter: int = 200,
    ):
        self.enforce_stationarity = enforce_stationarity
        self.enforce_invertibility = enforce_invertibility
        self.maxiter = maxiter
        self.results = None
        self._n_obs = 0

    @classmethod
    def from_config(cls, config: ModelConfig) -> "SarimaAdapter":
        return cls(
            enforce_stationarity=config.enforce_stationarity,
            enforce_invertibility=config.enforce_invertibility,
            maxiter=config.maxiter,
        )

    def fit(self, series: ObservationSeries, orders: SarimaOrder) -> None:
        # A failed refit must not leave the previous model usable
        self.results = None
        self._n_obs = 0

        required = orders.min_observations()
        if len(series) < required:
            raise InsufficientDataError(
                f"{orders} needs at least {required} observations, got {len(series)}"
            )

        y = pd.Series(series.as_array(), index=pd.RangeIndex(len(series)), name=series.name)
        model = SARIMAX(
            y,
            order=orders.order,
            seasonal_order=orders.seasonal_order,
            enforce_stationarity=self.enforce_stationarity,
            enforce_invertibility=self.enforce_invertibility,
        )

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.results = model.fit(disp=False, maxiter=self.maxiter)
        for w in caught:
            logger.warning(f"statsmodels: {w.category.__name__}: {w.message}")

        self._n_obs = len(series)
        logger.info(f"Fitted {orders}: AIC={self.results.aic:.2f} BIC={self.results.bic:.2f}")

    def forecast(self, horizon: int) -> ForecastResult:
        if self.results is None:
            raise ModelNotFittedError("fit() must be called before forecast()")
        if horizon < 1:
            raise InvalidArgumentError(f"Horizon must be >= 1, got {horizon}")

        prediction = self.results.get_forecast(steps=horizon)
        means = np.asarray(prediction.predicted_mean, dtype=float)
        std_errors = np.asarray(prediction.se_mean, dtype=float)
        indices = range(self._n_obs, self._n_obs + horizon)

        return ForecastResult(steps=[
            ForecastStep(index=i, mean=float(m), std_error=float(se))
            for i, m, se in zip(indices, means, std_errors)
        ])
