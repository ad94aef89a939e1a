"""Per-variable estimators: linear-trend projection or historical mean.

Which one a variable gets is a modelling choice, not a property of the data,
so it lives in an explicit table rather than being inferred.
"""

import logging
from statistics import fmean

from scipy.stats import linregress

from outlook.models.common import EstimateMethod, Variable
from outlook.models.dataset import YearValuePoint

logger = logging.getLogger(__name__)

VARIABLE_POLICY: dict[Variable, EstimateMethod] = {
    Variable.T2M: EstimateMethod.TREND,
    Variable.WS2M: EstimateMethod.TREND,
    Variable.PRECTOTCORR: EstimateMethod.MEAN,
    Variable.RH2M: EstimateMethod.MEAN,
    Variable.SNODP: EstimateMethod.MEAN,
}

MIN_REGRESSION_POINTS = 2


def fit_line(xs: list[float], ys: list[float]) -> tuple[float, float]:
    """Ordinary least squares fit. Returns (slope, intercept).

    Raises ValueError when fewer than two points are given.
    """
    if len(xs) < MIN_REGRESSION_POINTS:
        raise ValueError(f"need at least {MIN_REGRESSION_POINTS} points, got {len(xs)}")
    if len(set(xs)) == 1:
        # All x equal: slope undefined, use the mean.
        return 0.0, fmean(ys)
    result = linregress(xs, ys)
    return float(result.slope), float(result.intercept)


def project_value(points: list[YearValuePoint], target_year: int) -> float | None:
    """Evaluate the OLS line through (year, value) at target_year.

    Returns None when fewer than two points are available.
    """
    if len(points) < MIN_REGRESSION_POINTS:
        return None
    slope, intercept = fit_line(
        [float(p.year) for p in points], [p.value for p in points]
    )
    return slope * target_year + intercept


def historical_mean(values: list[float]) -> float:
    """Arithmetic mean, or 0.0 for an empty series."""
    if not values:
        return 0.0
    return fmean(values)


def estimate(
    variable: Variable, points: list[YearValuePoint], target_year: int
) -> float | None:
    """Estimate a variable for target_year according to VARIABLE_POLICY."""
    method = VARIABLE_POLICY[variable]
    if method == EstimateMethod.TREND:
        value = project_value(points, target_year)
        if value is None:
            logger.debug(
                "No %s projection: %d historical points", variable, len(points)
            )
        return value
    return historical_mean([p.value for p in points])
