"""
SeriesSource Port - Interface for loading the observation series.
"""

from abc import ABC, abstractmethod

from followcast.core.domain.result import ObservationSeries


class SeriesSource(ABC):
    """
    Abstract interface for reading observations.

    Implementations:
    - CsvSeriesSource: CSV export with one row per sample
    """

    @abstractmethod
    def load(self) -> ObservationSeries:
        """
        Read the complete series.

        Returns:
            ObservationSeries in chronological order
        """
        ...
