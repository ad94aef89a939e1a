"""Raw daily dataset models.

Readings are stored as ``float | None``. The upstream fill value (any reading
at or below -999) is never exposed as a number: ``DailyRecord.get`` maps it
to ``None`` so analysis code only ever sees real readings or nothing.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date

from outlook.models.common import Variable

MISSING_SENTINEL = -999.0


def is_missing(value: float | None) -> bool:
    return value is None or value <= MISSING_SENTINEL


@dataclass(frozen=True)
class DailyRecord:
    date: date
    readings: dict[Variable, float | None]

    def get(self, variable: Variable) -> float | None:
        value = self.readings.get(variable)
        if is_missing(value):
            return None
        return float(value)


@dataclass(frozen=True)
class RawDataset:
    latitude: float
    longitude: float
    start_year: int
    end_year: int
    records: tuple[DailyRecord, ...]

    def for_calendar_day(self, month: int, day: int) -> list[DailyRecord]:
        """All records falling on month/day, one per year at most, in date order."""
        return [
            r for r in self.records if r.date.month == month and r.date.day == day
        ]

    def by_year(self) -> dict[int, list[DailyRecord]]:
        grouped: dict[int, list[DailyRecord]] = defaultdict(list)
        for record in self.records:
            grouped[record.date.year].append(record)
        return dict(grouped)


@dataclass(frozen=True)
class YearValuePoint:
    year: int
    value: float


@dataclass(frozen=True)
class PrecipitationSample:
    points: list[YearValuePoint]
    wet_days: int

    @property
    def valid_days(self) -> int:
        return len(self.points)
