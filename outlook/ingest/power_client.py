"""NASA POWER daily point API client with retry and rate limit handling."""

import logging
import time
from collections.abc import Iterable

import httpx

from outlook.config.defaults import POWER_DAILY_URL
from outlook.errors import UpstreamFetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "climate-outlook/0.1.0"
RETRY_STATUSES = (429, 502, 503, 504)


class PowerClient:
    def __init__(
        self,
        base_url: str = POWER_DAILY_URL,
        community: str = "RE",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 60.0,
        max_retries: int = 2,
        retry_base_delay: float = 2.0,
    ):
        self.base_url = base_url
        self.community = community
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_daily(
        self,
        latitude: float,
        longitude: float,
        variables: Iterable[str],
        start: str,
        end: str,
    ) -> dict:
        """Fetch the daily point series for the given variables and date range.

        start/end are YYYYMMDD. Retries 429/5xx gateway errors and transport
        errors with exponential backoff; anything still failing is raised as
        UpstreamFetchError.
        """
        params = {
            "parameters": ",".join(str(v) for v in variables),
            "community": self.community,
            "longitude": longitude,
            "latitude": latitude,
            "start": start,
            "end": end,
            "format": "JSON",
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(
                    self.base_url, params=params, headers=headers, timeout=self.timeout
                )
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "POWER request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("POWER request failed for %s,%s: %s", latitude, longitude, e)
                raise UpstreamFetchError(f"Dataset source unreachable: {e}") from e

            if resp.status_code in RETRY_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "POWER returned %d, retrying in %.1fs (attempt %d/%d)",
                    resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue

            if resp.status_code >= 400:
                logger.error(
                    "POWER returned %d for %s,%s: %s",
                    resp.status_code, latitude, longitude, resp.text[:200],
                )
                raise UpstreamFetchError(
                    f"Dataset source returned HTTP {resp.status_code}",
                    upstream_status=resp.status_code,
                )

            try:
                return resp.json()
            except ValueError as e:
                raise UpstreamFetchError("Dataset source returned invalid JSON") from e

        raise UpstreamFetchError("Dataset source retries exhausted")
