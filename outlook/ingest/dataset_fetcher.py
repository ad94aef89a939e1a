"""Dataset fetcher: serves raw datasets from cache, falling back to NASA POWER."""

import logging

from outlook.config.schema import OutlookConfig
from outlook.ingest.power_client import PowerClient
from outlook.ingest.power_parser import parse_power_response
from outlook.models.dataset import RawDataset
from outlook.storage.dataset_cache import DatasetCache, cache_key

logger = logging.getLogger(__name__)


class DatasetFetcher:
    def __init__(self, client: PowerClient, cache: DatasetCache, config: OutlookConfig):
        self.client = client
        self.cache = cache
        self.config = config

    def fetch(self, latitude: float, longitude: float) -> RawDataset:
        """Return the dataset for a coordinate pair, fetching on cache miss.

        A fresh upstream body is stored verbatim, but only once it parses.
        """
        key = cache_key(latitude, longitude, self.config.cache.precision)
        raw = self.cache.get(key)
        if raw is not None:
            logger.info("[Cache Hit] %s", key)
            return self._parse(raw, latitude, longitude)

        logger.info("[Cache Miss] %s, requesting NASA POWER", key)
        api = self.config.api
        raw = self.client.get_daily(
            latitude, longitude, api.variables, api.start_date, api.end_date
        )
        dataset = self._parse(raw, latitude, longitude)
        self.cache.put(key, raw)
        logger.info("Cached %s", key)
        return dataset

    def _parse(self, raw: dict, latitude: float, longitude: float) -> RawDataset:
        api = self.config.api
        return parse_power_response(
            raw,
            latitude=latitude,
            longitude=longitude,
            start_year=api.start_year,
            end_year=api.end_year,
            variables=list(api.variables),
        )


def build_fetcher(config: OutlookConfig, cache: DatasetCache) -> DatasetFetcher:
    api = config.api
    client = PowerClient(
        base_url=api.base_url,
        community=api.community,
        timeout=api.timeout,
        max_retries=api.max_retries,
        retry_base_delay=api.retry_base_delay,
    )
    return DatasetFetcher(client, cache, config)
