"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from outlook.config.defaults import (
    DEFAULT_END_DATE,
    DEFAULT_START_DATE,
    DEFAULT_VARIABLES,
    POWER_DAILY_URL,
)
from outlook.models.common import Variable


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = POWER_DAILY_URL
    community: str = "RE"
    variables: list[Variable] = Field(default_factory=lambda: list(DEFAULT_VARIABLES))
    start_date: str = Field(default=DEFAULT_START_DATE, pattern=r"^\d{8}$")
    end_date: str = Field(default=DEFAULT_END_DATE, pattern=r"^\d{8}$")
    timeout: float = Field(default=60.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)

    @field_validator("end_date")
    @classmethod
    def _end_after_start(cls, v: str, info) -> str:
        start = info.data.get("start_date")
        if start is not None and v < start:
            raise ValueError(f"end_date {v} precedes start_date {start}")
        return v

    @property
    def start_year(self) -> int:
        return int(self.start_date[:4])

    @property
    def end_year(self) -> int:
        return int(self.end_date[:4])


class WeightsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    target_day: float = Field(default=4.0, gt=0.0)
    neighbor_day: float = Field(default=1.0, ge=0.0)


class AnalysisConfig(BaseModel):
    model_config = {"extra": "forbid"}

    day_window: int = Field(default=2, ge=0, le=15)
    weights: WeightsConfig = WeightsConfig()
    wet_day_threshold_mm: float = Field(default=0.1, ge=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    directory: str = "cache"
    precision: int = Field(default=2, ge=0, le=6)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    static_dir: str = "static"


class OutlookConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    analysis: AnalysisConfig = AnalysisConfig()
    cache: CacheConfig = CacheConfig()
    server: ServerConfig = ServerConfig()
