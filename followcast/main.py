import argparse
import logging
import sys

from followcast.adapters.config.settings_loader import load_settings
from followcast.adapters.data.csv_source import CsvSeriesSource
from followcast.adapters.models.sarima import SarimaAdapter
from followcast.adapters.plotting.diagnostics import plot_diagnostics
from followcast.adapters.plotting.matplotlib_renderer import MatplotlibRenderer
from followcast.core.domain.result import RunResult
from followcast.core.domain.settings import ForecastSettings
from followcast.core.services.forecast_run import ForecastRun

logger = logging.getLogger(__name__)


def build_run(settings: ForecastSettings) -> ForecastRun:
    """Wire adapters from settings."""
    suggester = None
    if settings.suggest.enabled:
        from followcast.adapters.models.auto_arima import AutoArimaSuggester
        suggester = AutoArimaSuggester.from_config(settings.suggest)

    return ForecastRun(
        source=CsvSeriesSource.from_config(settings.data),
        engine=SarimaAdapter.from_config(settings.model),
        renderer=MatplotlibRenderer.from_config(settings.plot),
        suggester=suggester,
        diagnostics=plot_diagnostics,
    )


def run(settings: ForecastSettings) -> RunResult:
    return build_run(settings).run(settings)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Forecast hourly follower activity with SARIMA")
    parser.add_argument("--config", default=None, help="Path to config.yaml (default: $FOLLOWCAST_CONFIG_FILE or config.yaml)")
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    logging.basicConfig(level=getattr(logging, settings.log_level))

    try:
        result = run(settings)
    except Exception as e:
        logger.exception(f"Run aborted: {e}")
        return 1

    for point in result.points:
        logger.debug(
            f"{point.timestamp:%Y-%m-%d %H:%M} {point.value:.2f} "
            f"[{point.lower_bound:.2f}, {point.upper_bound:.2f}]"
        )
    if settings.plot.output_path is None:
        import matplotlib.pyplot as plt
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
