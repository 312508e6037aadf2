import asyncio

import pytest

from application.services import FixtureDataService, RiotDataService, build_riot_client, get_data_service
from config import Settings
from domain.errors import ConfigurationError


def _settings(tmp_path, **overrides):
    cfg = Settings()
    cfg.MATCH_CACHE_PATH = tmp_path / "matches.sqlite"
    for name, value in overrides.items():
        setattr(cfg, name, value)
    return cfg


def test_mock_source_uses_fixtures(tmp_path):
    service = get_data_service(_settings(tmp_path, DATA_SOURCE="mock", RIOT_API_KEY=""))

    assert isinstance(service, FixtureDataService)


def test_live_source_without_key_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        get_data_service(_settings(tmp_path, DATA_SOURCE="riot", RIOT_API_KEY=""))


def test_live_source_wires_client(tmp_path):
    cfg = _settings(tmp_path, DATA_SOURCE="riot", RIOT_API_KEY="RGAPI-test",
                    RATE_LIMIT_PER_SECOND=7, MATCH_BATCH_SIZE=3)

    service = get_data_service(cfg)

    assert isinstance(service, RiotDataService)
    client = service.client
    assert client.rate_limiter.max_tokens == 7
    assert client.match_batch_size == 3
    assert client.match_cache.available
    asyncio.run(service.aclose())


def test_cache_can_be_disabled(tmp_path):
    client = build_riot_client(_settings(tmp_path, RIOT_API_KEY="RGAPI-test", MATCH_CACHE_ENABLED=False))

    assert client.match_cache is None
