"""Day-window aggregation: blends per-day estimates around the target day."""

import logging
from datetime import date, timedelta

from outlook.analysis.estimator import estimate
from outlook.analysis.probability import wet_day_probability
from outlook.analysis.series import extract_precipitation, extract_series
from outlook.config.schema import AnalysisConfig, OutlookConfig
from outlook.errors import InsufficientDataError, InvalidRequestError
from outlook.models.common import METRIC_FOR_VARIABLE, Metric, Variable
from outlook.models.dataset import RawDataset
from outlook.models.outlook import DayMetrics, WindowEstimate

logger = logging.getLogger(__name__)

# Leap year, so Feb 29 is a valid target and offsets wrap across year ends.
REFERENCE_YEAR = 2000


def window_days(month: int, day: int, radius: int) -> list[tuple[int, int, int]]:
    """(offset, month, day) for every offset in -radius..+radius."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    try:
        target = date(REFERENCE_YEAR, month, day)
    except ValueError as e:
        raise InvalidRequestError(f"Invalid calendar day {month:02d}-{day:02d}") from e
    result = []
    for offset in range(-radius, radius + 1):
        d = target + timedelta(days=offset)
        result.append((offset, d.month, d.day))
    return result


def offset_weight(offset: int, analysis: AnalysisConfig) -> float:
    if offset == 0:
        return analysis.weights.target_day
    return analysis.weights.neighbor_day


def compute_day_metrics(
    dataset: RawDataset,
    month: int,
    day: int,
    target_year: int,
    config: OutlookConfig,
    offset: int = 0,
) -> DayMetrics:
    """Estimate every configured variable for one calendar day."""
    values: dict[Metric, float | None] = {}
    valid_days = sum(
        1
        for record in dataset.for_calendar_day(month, day)
        if any(record.get(v) is not None for v in config.api.variables)
    )
    for variable in config.api.variables:
        metric = METRIC_FOR_VARIABLE[variable]
        if variable == Variable.PRECTOTCORR:
            sample = extract_precipitation(
                dataset, month, day, config.analysis.wet_day_threshold_mm
            )
            values[metric] = estimate(variable, sample.points, target_year)
            values[Metric.PRECIPITATION_PROBABILITY] = wet_day_probability(
                sample.wet_days, sample.valid_days
            )
        else:
            points = extract_series(dataset, month, day, variable)
            values[metric] = estimate(variable, points, target_year)
    return DayMetrics(
        offset=offset, month=month, day=day, values=values, valid_days=valid_days
    )


def aggregate_window(
    dataset: RawDataset,
    month: int,
    day: int,
    target_year: int,
    config: OutlookConfig,
) -> WindowEstimate:
    """Weighted blend of per-day metrics over the configured window.

    An offset counts toward the divisor when it has any valid reading at all,
    even if its estimate for a particular metric is None; such None entries
    add nothing to the numerator. Offsets with no data contribute nothing.
    Raises InsufficientDataError when nothing in the window carries weight.
    """
    analysis = config.analysis
    days = [
        compute_day_metrics(dataset, m, d, target_year, config, offset=offset)
        for offset, m, d in window_days(month, day, analysis.day_window)
    ]

    metrics: list[Metric] = []
    for dm in days:
        for metric in dm.values:
            if metric not in metrics:
                metrics.append(metric)

    totals = {metric: 0.0 for metric in metrics}
    divisor = 0.0
    for dm in days:
        if dm.valid_days == 0:
            continue
        weight = offset_weight(dm.offset, analysis)
        for metric in metrics:
            value = dm.get(metric)
            if value is not None:
                totals[metric] += value * weight
        divisor += weight

    if divisor <= 0:
        logger.warning("No weighted history around %02d-%02d", month, day)
        raise InsufficientDataError(
            f"No historical data around {month:02d}-{day:02d} to project {target_year}"
        )
    totals = {metric: total / divisor for metric, total in totals.items()}

    logger.debug(
        "Aggregated %d days around %02d-%02d (divisor %.1f)",
        len(days), month, day, divisor,
    )
    return WindowEstimate(values=totals, divisor=divisor, days=days)
