"""Derived outlook models. Built fresh per request and never persisted."""

from dataclasses import dataclass, field

from outlook.models.common import Metric, TrendDirection


@dataclass(frozen=True)
class DayMetrics:
    offset: int
    month: int
    day: int
    values: dict[Metric, float | None]
    valid_days: int = 0  # years with at least one valid reading on this day

    def get(self, metric: Metric) -> float | None:
        return self.values.get(metric)


@dataclass
class WindowEstimate:
    values: dict[Metric, float] = field(default_factory=dict)
    divisor: float = 0.0
    days: list[DayMetrics] = field(default_factory=list)

    @property
    def target_day(self) -> DayMetrics | None:
        for d in self.days:
            if d.offset == 0:
                return d
        return None


@dataclass(frozen=True)
class ClimateTrend:
    period_start: int
    period_end: int
    slope: float  # units per year
    direction: TrendDirection


@dataclass(frozen=True)
class Outlook:
    target_year: int
    month: int
    day: int
    temperature_c: float
    wind_speed_ms: float
    humidity_percent: int
    precipitation_mm: float
    precipitation_probability_percent: int
    snow_depth_display: float
    trend: ClimateTrend
