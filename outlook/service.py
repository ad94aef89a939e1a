"""Request validation and the fetch -> compute -> format flow."""

import logging
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from outlook.analysis.assembler import compute_outlook
from outlook.config.schema import OutlookConfig
from outlook.errors import InvalidRequestError
from outlook.ingest.dataset_fetcher import DatasetFetcher
from outlook.models.outlook import Outlook
from outlook.reporting.formatters import format_outlook_response

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("latitude", "longitude", "month", "day", "targetYear")


class OutlookRequest(BaseModel):
    model_config = {"populate_by_name": True}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    target_year: int = Field(alias="targetYear")


def validate_request(payload: dict[str, Any] | None, end_year: int) -> OutlookRequest:
    """Check presence, ranges, calendar validity and that the year is in the future."""
    payload = payload or {}
    missing = [
        name for name in REQUIRED_FIELDS
        if payload.get(name) is None and payload.get(_snake(name)) is None
    ]
    if missing:
        raise InvalidRequestError(
            "Missing parameters: latitude, longitude, month, day and targetYear are required "
            f"(missing: {', '.join(missing)})"
        )
    try:
        request = OutlookRequest.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][-1]) for err in e.errors())
        raise InvalidRequestError(f"Invalid parameters: {fields}") from e

    try:
        date(2000, request.month, request.day)
    except ValueError as e:
        raise InvalidRequestError(
            f"Invalid calendar day {request.month:02d}-{request.day:02d}"
        ) from e

    if request.target_year <= end_year:
        raise InvalidRequestError(
            f"Invalid target year. Please choose a year after {end_year}."
        )
    return request


def _snake(name: str) -> str:
    return "target_year" if name == "targetYear" else name


class OutlookService:
    def __init__(self, config: OutlookConfig, fetcher: DatasetFetcher):
        self.config = config
        self.fetcher = fetcher

    def outlook(self, payload: dict[str, Any] | None) -> Outlook:
        request = validate_request(payload, self.config.api.end_year)
        dataset = self.fetcher.fetch(request.latitude, request.longitude)
        result = compute_outlook(
            dataset, request.month, request.day, request.target_year, self.config
        )
        logger.info(
            "Outlook %.2f,%.2f %02d-%02d/%d: %.1fC, %d%% precip",
            request.latitude, request.longitude, request.month, request.day,
            request.target_year, result.temperature_c,
            result.precipitation_probability_percent,
        )
        return result

    def analyze(self, payload: dict[str, Any] | None) -> dict:
        return format_outlook_response(self.outlook(payload))
