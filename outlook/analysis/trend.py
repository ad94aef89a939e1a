"""Whole-period climate trend from yearly means."""

from statistics import fmean

from outlook.analysis.estimator import MIN_REGRESSION_POINTS, fit_line
from outlook.errors import InsufficientDataError
from outlook.models.common import TrendDirection, Variable
from outlook.models.dataset import RawDataset
from outlook.models.outlook import ClimateTrend

# Fixed classification band, degrees per year.
TREND_THRESHOLD = 0.005


def yearly_means(dataset: RawDataset, variable: Variable = Variable.T2M) -> dict[int, float]:
    """Mean of valid readings per year. Years with no valid reading are omitted."""
    means: dict[int, float] = {}
    for year, records in sorted(dataset.by_year().items()):
        values = [v for v in (r.get(variable) for r in records) if v is not None]
        if values:
            means[year] = fmean(values)
    return means


def annual_trend(dataset: RawDataset, variable: Variable = Variable.T2M) -> float | None:
    """OLS slope of yearly means against year, or None with fewer than two years."""
    means = yearly_means(dataset, variable)
    if len(means) < MIN_REGRESSION_POINTS:
        return None
    slope, _ = fit_line([float(y) for y in means], list(means.values()))
    return slope


def classify_trend(slope: float) -> TrendDirection:
    if slope > TREND_THRESHOLD:
        return TrendDirection.INCREASING
    if slope < -TREND_THRESHOLD:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def climate_trend(dataset: RawDataset, variable: Variable = Variable.T2M) -> ClimateTrend:
    slope = annual_trend(dataset, variable)
    if slope is None:
        raise InsufficientDataError(
            f"Need at least {MIN_REGRESSION_POINTS} years of {variable} data "
            "to compute a climate trend"
        )
    return ClimateTrend(
        period_start=dataset.start_year,
        period_end=dataset.end_year,
        slope=slope,
        direction=classify_trend(slope),
    )
