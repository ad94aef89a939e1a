"""Tests for the cache-backed dataset fetcher with mocked POWER client."""

from unittest.mock import MagicMock

import pytest

from outlook.errors import UpstreamFetchError
from outlook.ingest.dataset_fetcher import DatasetFetcher, build_fetcher
from outlook.ingest.power_client import PowerClient
from outlook.models.common import Variable
from outlook.storage.dataset_cache import MemoryDatasetCache, cache_key


class TestDatasetFetcher:
    def test_cache_miss_fetches_and_stores(self, power_payload, synthetic_config):
        mock_power = MagicMock(spec=PowerClient)
        mock_power.get_daily.return_value = power_payload
        cache = MemoryDatasetCache()

        fetcher = DatasetFetcher(mock_power, cache, synthetic_config)
        ds = fetcher.fetch(41.0082, 28.9784)

        assert ds.start_year == 2015
        assert ds.end_year == 2024
        assert cache.get("data-41_01_28_98") == power_payload
        mock_power.get_daily.assert_called_once_with(
            41.0082, 28.9784, synthetic_config.api.variables, "20150101", "20241231"
        )

    def test_cache_hit_skips_client(self, power_payload, synthetic_config):
        mock_power = MagicMock(spec=PowerClient)
        cache = MemoryDatasetCache()
        cache.put(cache_key(41.01, 28.98), power_payload)

        fetcher = DatasetFetcher(mock_power, cache, synthetic_config)
        ds = fetcher.fetch(41.01, 28.98)

        mock_power.get_daily.assert_not_called()
        assert ds.records[0].get(Variable.T2M) == 10.0

    def test_nearby_coordinates_share_entry(self, power_payload, synthetic_config):
        mock_power = MagicMock(spec=PowerClient)
        mock_power.get_daily.return_value = power_payload

        fetcher = DatasetFetcher(mock_power, MemoryDatasetCache(), synthetic_config)
        fetcher.fetch(41.0101, 28.9799)
        fetcher.fetch(41.0149, 28.9751)

        assert mock_power.get_daily.call_count == 1

    def test_upstream_error_not_cached(self, synthetic_config):
        mock_power = MagicMock(spec=PowerClient)
        mock_power.get_daily.side_effect = UpstreamFetchError("down", upstream_status=500)
        cache = MemoryDatasetCache()

        fetcher = DatasetFetcher(mock_power, cache, synthetic_config)
        with pytest.raises(UpstreamFetchError):
            fetcher.fetch(41.01, 28.98)
        assert cache.get(cache_key(41.01, 28.98)) is None

    def test_unusable_payload_not_cached(self, power_payload, synthetic_config):
        mock_power = MagicMock(spec=PowerClient)
        mock_power.get_daily.return_value = {"messages": ["upstream error"], "header": {}}
        cache = MemoryDatasetCache()

        fetcher = DatasetFetcher(mock_power, cache, synthetic_config)
        with pytest.raises(UpstreamFetchError):
            fetcher.fetch(41.0, 29.0)
        assert cache.get("data-41_00_29_00") is None

        # A later good response is fetched and stored normally.
        mock_power.get_daily.return_value = power_payload
        ds = fetcher.fetch(41.0, 29.0)
        assert ds.records
        assert cache.get("data-41_00_29_00") == power_payload
        assert mock_power.get_daily.call_count == 2


class TestBuildFetcher:
    def test_client_from_config(self, synthetic_config):
        fetcher = build_fetcher(synthetic_config, MemoryDatasetCache())
        assert fetcher.client.base_url == synthetic_config.api.base_url
        assert fetcher.client.max_retries == 0
