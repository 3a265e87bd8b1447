"""
ACF / PACF diagnostics used to pick SARIMA orders by eye.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from statsmodels.graphics.tsaplots import plot_acf, plot_pacf

from followcast.core.domain.errors import InvalidArgumentError
from followcast.core.domain.result import ObservationSeries

logger = logging.getLogger(__name__)


def max_lags(n_obs: int, requested: int) -> int:
    """PACF needs lags < n_obs // 2."""
    return max(1, min(requested, n_obs // 2 - 1))


def plot_diagnostics(
    series: ObservationSeries,
    lags: int = 48,
    output_path: str | Path | None = None,
):
    """
    Draw ACF and PACF of the series side by side.

    Returns:
        matplotlib Figure with two axes
    """
    if len(series) < 4:
        raise InvalidArgumentError(f"Need at least 4 observations for ACF/PACF, got {len(series)}")

    nlags = max_lags(len(series), lags)
    if nlags < lags:
        logger.debug(f"Capping diagnostic lags at {nlags} for {len(series)} observations")

    y = series.as_array()
    fig, axes = plt.subplots(1, 2, figsize=(14, 4))
    plot_acf(y, lags=nlags, ax=axes[0], title=f"ACF - {series.name}")
    plot_pacf(y, lags=nlags, ax=axes[1], method="ywm", title=f"PACF - {series.name}")
    fig.tight_layout()

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path)
        logger.info(f"Saved diagnostics to {output_path}")

    return fig
