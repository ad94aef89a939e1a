"""Tests for whole-period climate trend."""

from datetime import date

import pytest

from outlook.analysis.trend import (
    annual_trend,
    classify_trend,
    climate_trend,
    yearly_means,
)
from outlook.errors import InsufficientDataError
from outlook.models.common import TrendDirection, Variable

T2M = Variable.T2M


class TestYearlyMeans:
    def test_means_per_year(self, dataset_factory):
        ds = dataset_factory({
            date(2020, 1, 1): {T2M: 0.0},
            date(2020, 7, 1): {T2M: 20.0},
            date(2021, 1, 1): {T2M: 2.0},
            date(2021, 7, 1): {T2M: 22.0},
        })
        assert yearly_means(ds) == {2020: 10.0, 2021: 12.0}

    def test_missing_readings_excluded(self, dataset_factory):
        ds = dataset_factory({
            date(2020, 1, 1): {T2M: 10.0},
            date(2020, 1, 2): {T2M: -999.0},
            date(2021, 1, 1): {T2M: None},
        })
        assert yearly_means(ds) == {2020: 10.0}


class TestAnnualTrend:
    def test_slope(self, dataset_factory):
        rows = {}
        for year in range(2000, 2010):
            for month in (1, 6, 12):
                rows[date(year, month, 1)] = {T2M: 15.0 + 0.03 * (year - 2000)}
        assert annual_trend(dataset_factory(rows)) == pytest.approx(0.03)

    def test_uses_all_days_not_just_window(self, dataset_factory):
        rows = {
            date(2020, 1, 1): {T2M: 0.0},
            date(2020, 12, 31): {T2M: 10.0},
            date(2021, 1, 1): {T2M: 10.0},
            date(2021, 12, 31): {T2M: 10.0},
        }
        # yearly means 5.0 then 10.0
        assert annual_trend(dataset_factory(rows)) == pytest.approx(5.0)

    def test_single_year_is_no_trend(self, dataset_factory):
        ds = dataset_factory({
            date(2020, 1, 1): {T2M: 1.0},
            date(2020, 1, 2): {T2M: 2.0},
        })
        assert annual_trend(ds) is None

    def test_climate_trend_raises_without_data(self, dataset_factory):
        ds = dataset_factory({date(2020, 1, 1): {T2M: 1.0}})
        with pytest.raises(InsufficientDataError):
            climate_trend(ds)

    def test_climate_trend_period_from_dataset(self, dataset_factory):
        ds = dataset_factory({
            date(2018, 1, 1): {T2M: 1.0},
            date(2024, 1, 1): {T2M: 1.0},
        })
        trend = climate_trend(ds)
        assert (trend.period_start, trend.period_end) == (2018, 2024)
        assert trend.direction == TrendDirection.STABLE


class TestClassifyTrend:
    @pytest.mark.parametrize(
        "slope,expected",
        [
            (0.005, TrendDirection.STABLE),
            (0.00499, TrendDirection.STABLE),
            (0.00501, TrendDirection.INCREASING),
            (-0.005, TrendDirection.STABLE),
            (-0.00501, TrendDirection.DECREASING),
            (0.0, TrendDirection.STABLE),
            (0.04, TrendDirection.INCREASING),
            (-0.2, TrendDirection.DECREASING),
        ],
    )
    def test_boundaries(self, slope, expected):
        assert classify_trend(slope) == expected
