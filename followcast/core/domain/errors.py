"""
Error types raised by the forecasting pipeline.

Library errors (missing file, malformed CSV, statsmodels failures) are not
wrapped and propagate unchanged.
"""


class FollowcastError(Exception):
    """Base class for pipeline errors."""


class InvalidArgumentError(FollowcastError, ValueError):
    """An argument is outside its accepted domain."""


class DataLoadError(FollowcastError):
    """The input file could not be turned into an observation series."""


class InsufficientDataError(FollowcastError):
    """Too few observations to fit the requested model orders."""


class ModelNotFittedError(FollowcastError):
    """Forecast requested before the model was fitted."""
