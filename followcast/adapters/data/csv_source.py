"""
CSV Series Source Adapter - Reads a follower-activity export.

One row per hourly sample, in chronological order.
"""

import logging
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np
import pandas as pd

from followcast.core.domain.errors import DataLoadError
from followcast.core.domain.result import ObservationSeries
from followcast.core.domain.settings import DataConfig
from followcast.core.ports.series_source import SeriesSource

logger = logging.getLogger(__name__)


class CsvSeriesSource(SeriesSource):
    """
    Series source backed by a CSV file with a header row.
    """

    def __init__(
        self,
        csv_path: str | Path,
        value_column: str = "Active followers",
        timestamp_column: str | None = None,
        start_time: datetime = datetime(2024, 1, 1),
        spacing: timedelta = timedelta(hours=1),
        max_rows: int | None = None,
    ):
        self.csv_path = Path(csv_path)
        self.value_column = value_column
        self.timestamp_column = timestamp_column
        self.start_time = start_time
        self.spacing = spacing
        self.max_rows = max_rows

    @classmethod
    def from_config(cls, config: DataConfig) -> "CsvSeriesSource":
        return cls(
            csv_path=config.csv_path,
            value_column=config.value_column,
            timestamp_column=config.timestamp_column,
            start_time=config.start_time,
            spacing=config.spacing,
            max_rows=config.max_rows,
        )

    def load(self) -> ObservationSeries:
        """Read the file and coerce the value column to a series."""
        # FileNotFoundError and parser errors propagate from pandas
        df = pd.read_csv(self.csv_path)
        logger.debug(f"Read {len(df)} rows with columns {list(df.columns)} from {self.csv_path}")

        if self.value_column not in df.columns:
            raise DataLoadError(
                f"{self.csv_path} must contain column '{self.value_column}', "
                f"found {list(df.columns)}"
            )
        if self.max_rows is not None:
            df = df.tail(self.max_rows)
        if df.empty:
            raise DataLoadError(f"{self.csv_path} contains no observations")

        values = pd.to_numeric(df[self.value_column], errors="coerce")
        bad = values.isna() | ~np.isfinite(values)
        if bad.any():
            first = df.index[bad.to_numpy()][0]
            raise DataLoadError(
                f"Non-numeric value in '{self.value_column}' at row {first}: "
                f"{df[self.value_column].loc[first]!r}"
            )
        if (values < 0).any():
            first = values[values < 0].index[0]
            raise DataLoadError(
                f"Negative value in '{self.value_column}' at row {first}: {values.loc[first]}"
            )

        start_time = self.start_time
        if self.timestamp_column:
            if self.timestamp_column not in df.columns:
                raise DataLoadError(
                    f"{self.csv_path} must contain column '{self.timestamp_column}'"
                )
            first = pd.to_datetime(df[self.timestamp_column].iloc[0], errors="coerce")
            if pd.isna(first):
                raise DataLoadError(
                    f"First value of '{self.timestamp_column}' is not a timestamp: "
                    f"{df[self.timestamp_column].iloc[0]!r}"
                )
            start_time = first.to_pydatetime()

        return ObservationSeries(
            values=tuple(values.astype(float)),
            start_time=start_time,
            spacing=self.spacing,
            name=self.value_column,
        )
