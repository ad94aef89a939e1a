"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class Variable(StrEnum):
    """NASA POWER parameter codes tracked by the outlook."""

    T2M = "T2M"  # Temperature at 2 m, degrees C
    WS2M = "WS2M"  # Wind speed at 2 m, m/s
    PRECTOTCORR = "PRECTOTCORR"  # Bias-corrected precipitation, mm/day
    RH2M = "RH2M"  # Relative humidity at 2 m, %
    SNODP = "SNODP"  # Snow depth, source unit


class EstimateMethod(StrEnum):
    TREND = "trend"
    MEAN = "mean"


class Metric(StrEnum):
    TEMPERATURE = "temperature"
    WIND_SPEED = "wind_speed"
    PRECIPITATION = "precipitation"
    HUMIDITY = "humidity"
    SNOW_DEPTH = "snow_depth"
    PRECIPITATION_PROBABILITY = "precipitation_probability"


class TrendDirection(StrEnum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


METRIC_FOR_VARIABLE: dict[Variable, Metric] = {
    Variable.T2M: Metric.TEMPERATURE,
    Variable.WS2M: Metric.WIND_SPEED,
    Variable.PRECTOTCORR: Metric.PRECIPITATION,
    Variable.RH2M: Metric.HUMIDITY,
    Variable.SNODP: Metric.SNOW_DEPTH,
}


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
