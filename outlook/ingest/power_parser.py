"""Parse a NASA POWER daily point response into a RawDataset."""

import logging
from datetime import datetime

from outlook.errors import UpstreamFetchError
from outlook.models.common import Variable
from outlook.models.dataset import DailyRecord, RawDataset, is_missing

logger = logging.getLogger(__name__)


def parse_power_response(
    raw: dict,
    latitude: float,
    longitude: float,
    start_year: int,
    end_year: int,
    variables: list[Variable] | None = None,
) -> RawDataset:
    """Build a RawDataset from ``properties.parameter.<VAR>.<YYYYMMDD>``.

    Fill values and dates absent for a variable both become None.
    """
    try:
        parameters = raw["properties"]["parameter"]
    except (KeyError, TypeError) as e:
        raise UpstreamFetchError("Dataset payload missing properties.parameter") from e
    if not isinstance(parameters, dict):
        raise UpstreamFetchError("Dataset payload parameter block is not an object")

    known = {v.value for v in Variable}
    wanted = variables or [Variable(k) for k in parameters if k in known]
    date_keys: set[str] = set()
    for variable in wanted:
        series = parameters.get(variable) or {}
        if not isinstance(series, dict):
            raise UpstreamFetchError(f"Dataset series for {variable} is not an object")
        date_keys.update(series.keys())

    records: list[DailyRecord] = []
    for key in sorted(date_keys):
        try:
            day = datetime.strptime(key, "%Y%m%d").date()
        except ValueError:
            logger.warning("Skipping malformed date key %r", key)
            continue
        readings: dict[Variable, float | None] = {}
        for variable in wanted:
            value = (parameters.get(variable) or {}).get(key)
            try:
                readings[variable] = None if is_missing(value) else float(value)
            except (TypeError, ValueError) as e:
                raise UpstreamFetchError(
                    f"Non-numeric {variable} reading for {key}: {value!r}"
                ) from e
        records.append(DailyRecord(date=day, readings=readings))

    return RawDataset(
        latitude=latitude,
        longitude=longitude,
        start_year=start_year,
        end_year=end_year,
        records=tuple(records),
    )
