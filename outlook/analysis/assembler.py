"""Final outlook assembly and the pipeline entry point."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from outlook.analysis.trend import climate_trend
from outlook.analysis.window import aggregate_window
from outlook.config.schema import OutlookConfig
from outlook.errors import InsufficientDataError
from outlook.models.common import Metric
from outlook.models.dataset import RawDataset
from outlook.models.outlook import ClimateTrend, Outlook, WindowEstimate

logger = logging.getLogger(__name__)

# Source snow depth is multiplied by 1000 for display. This looks like a
# metres-vs-millimetres mismatch in the source data, but the intended display
# unit is unconfirmed, so the factor is kept as-is.
SNOW_DEPTH_DISPLAY_FACTOR = 1000

REQUIRED_TARGET_METRICS = (Metric.TEMPERATURE, Metric.WIND_SPEED)


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals with ties going away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def probability_percent(probability: float) -> int:
    """Truncate probability * 100 to an int in [0, 100]."""
    # Round off binary noise first so 0.29 gives 29, not 28.
    return int(round(probability * 100, 9))


def assemble_outlook(
    window: WindowEstimate,
    trend: ClimateTrend,
    target_year: int,
    month: int,
    day: int,
) -> Outlook:
    target = window.target_day
    for metric in REQUIRED_TARGET_METRICS:
        if target is None or target.get(metric) is None:
            logger.warning(
                "Insufficient %s history for %02d-%02d", metric, month, day
            )
            raise InsufficientDataError(
                f"Not enough historical {metric.replace('_', ' ')} data for "
                f"{month:02d}-{day:02d} to project {target_year}"
            )

    values = window.values
    return Outlook(
        target_year=target_year,
        month=month,
        day=day,
        temperature_c=round_half_up(values[Metric.TEMPERATURE], 1),
        wind_speed_ms=round_half_up(values[Metric.WIND_SPEED], 1),
        humidity_percent=int(round_half_up(values.get(Metric.HUMIDITY, 0.0))),
        precipitation_mm=round_half_up(values.get(Metric.PRECIPITATION, 0.0), 1),
        precipitation_probability_percent=probability_percent(
            values.get(Metric.PRECIPITATION_PROBABILITY, 0.0)
        ),
        snow_depth_display=round_half_up(
            values.get(Metric.SNOW_DEPTH, 0.0) * SNOW_DEPTH_DISPLAY_FACTOR, 1
        ),
        trend=trend,
    )


def compute_outlook(
    dataset: RawDataset,
    month: int,
    day: int,
    target_year: int,
    config: OutlookConfig | None = None,
) -> Outlook:
    """Run the full analysis for one location, calendar day and future year."""
    config = config or OutlookConfig()
    window = aggregate_window(dataset, month, day, target_year, config)
    trend = climate_trend(dataset)
    return assemble_outlook(window, trend, target_year, month, day)
