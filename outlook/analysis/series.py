"""Per-calendar-day series extraction across all years of a dataset."""

from outlook.models.common import Variable
from outlook.models.dataset import PrecipitationSample, RawDataset, YearValuePoint

WET_DAY_THRESHOLD_MM = 0.1


def extract_series(
    dataset: RawDataset, month: int, day: int, variable: Variable
) -> list[YearValuePoint]:
    """Collect (year, value) for every year with a valid reading on month/day.

    Years without that calendar day (Feb 29 in common years) or with a missing
    reading are left out.
    """
    points: list[YearValuePoint] = []
    for record in dataset.for_calendar_day(month, day):
        value = record.get(variable)
        if value is None:
            continue
        points.append(YearValuePoint(year=record.date.year, value=value))
    return points


def extract_precipitation(
    dataset: RawDataset,
    month: int,
    day: int,
    threshold: float = WET_DAY_THRESHOLD_MM,
) -> PrecipitationSample:
    """Valid precipitation readings for month/day plus the count above threshold."""
    points = extract_series(dataset, month, day, Variable.PRECTOTCORR)
    wet_days = sum(1 for p in points if p.value > threshold)
    return PrecipitationSample(points=points, wet_days=wet_days)
