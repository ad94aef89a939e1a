"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from outlook.config.schema import AnalysisConfig, ApiConfig, OutlookConfig
from outlook.models.common import Variable


class TestDefaults:
    def test_analysis_defaults(self):
        a = AnalysisConfig()
        assert a.day_window == 2
        assert a.weights.target_day == 4
        assert a.weights.neighbor_day == 1
        assert a.wet_day_threshold_mm == 0.1

    def test_api_defaults(self):
        api = ApiConfig()
        assert api.start_year == 2000
        assert api.end_year == 2024
        assert set(api.variables) == set(Variable)
        assert "power.larc.nasa.gov" in api.base_url

    def test_configs_are_independent(self):
        c1 = OutlookConfig()
        c2 = OutlookConfig(analysis={"day_window": 0})
        assert c1.analysis.day_window == 2
        assert c2.analysis.day_window == 0


class TestValidation:
    def test_extra_field_forbidden(self):
        with pytest.raises(ValidationError):
            OutlookConfig(analysis={"window": 3})

    def test_negative_window_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(day_window=-1)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(weights={"target_day": -1})

    def test_zero_target_weight_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(weights={"target_day": 0, "neighbor_day": 0})

    def test_zero_neighbor_weight_allowed(self):
        config = AnalysisConfig(weights={"target_day": 1, "neighbor_day": 0})
        assert config.weights.neighbor_day == 0

    def test_bad_date_format_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(start_date="2000-01-01")

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(start_date="20200101", end_date="20101231")

    def test_unknown_variable_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(variables=["T2M", "QV2M"])
