"""
Confidence interval construction from point forecasts and standard errors.

Pure functions: no logging, no I/O. Bounds are symmetric normal intervals,
point +/- z * se with z = Phi^-1((1 + level) / 2).
"""

import math
from collections.abc import Sequence

from scipy.stats import norm

from followcast.core.domain.errors import InvalidArgumentError
from followcast.core.domain.result import ConfidenceInterval, ForecastResult


def z_score(confidence_level: float) -> float:
    """Two-sided standard-normal critical value for `confidence_level`."""
    if not isinstance(confidence_level, (int, float)) or not math.isfinite(confidence_level):
        raise InvalidArgumentError(f"Confidence level must be a finite number, got {confidence_level!r}")
    if not 0.0 < confidence_level < 1.0:
        raise InvalidArgumentError(
            f"Confidence level must be strictly between 0 and 1, got {confidence_level}"
        )
    return float(norm.ppf((1.0 + confidence_level) / 2.0))


def build_intervals(
    means: Sequence[float],
    std_errors: Sequence[float],
    confidence_level: float = 0.95,
) -> list[ConfidenceInterval]:
    """
    Compute per-step lower/upper bounds.

    Args:
        means: Point forecasts
        std_errors: Standard error of each point forecast
        confidence_level: Coverage probability in (0, 1)

    Raises:
        InvalidArgumentError: on a level outside (0, 1), mismatched lengths,
            or a negative / non-finite standard error
    """
    z = z_score(confidence_level)

    if len(means) != len(std_errors):
        raise InvalidArgumentError(
            f"Got {len(means)} point forecasts but {len(std_errors)} standard errors"
        )

    intervals = []
    for i, (mean, se) in enumerate(zip(means, std_errors)):
        if not math.isfinite(mean):
            raise InvalidArgumentError(f"Point forecast at step {i} must be finite, got {mean}")
        if not math.isfinite(se) or se < 0:
            raise InvalidArgumentError(f"Standard error at step {i} must be finite and >= 0, got {se}")
        margin = z * se
        intervals.append(ConfidenceInterval(lower=mean - margin, upper=mean + margin, level=confidence_level))
    return intervals


def intervals_for(result: ForecastResult, confidence_level: float = 0.95) -> list[ConfidenceInterval]:
    """Bounds for every step of a forecast result."""
    return build_intervals(result.means, result.std_errors, confidence_level)
