import pytest

from config import Settings
from config.settings import _bool_env, _int_env


def test_int_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("RIOT_STATS_TEST_INT", "twelve")
    assert _int_env("RIOT_STATS_TEST_INT", 7) == 7
    monkeypatch.setenv("RIOT_STATS_TEST_INT", "12")
    assert _int_env("RIOT_STATS_TEST_INT", 7) == 12


@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("false", False), ("0", False)])
def test_bool_env(monkeypatch, raw, expected):
    monkeypatch.setenv("RIOT_STATS_TEST_BOOL", raw)
    assert _bool_env("RIOT_STATS_TEST_BOOL", not expected) is expected


def test_bool_env_default(monkeypatch):
    monkeypatch.delenv("RIOT_STATS_TEST_BOOL", raising=False)
    assert _bool_env("RIOT_STATS_TEST_BOOL", True) is True


def test_live_source_requires_key():
    cfg = Settings()
    cfg.DATA_SOURCE = "live"
    cfg.RIOT_API_KEY = ""

    assert cfg.uses_live_api
    with pytest.raises(ValueError):
        cfg.validate()


def test_mock_source_needs_no_key():
    cfg = Settings()
    cfg.DATA_SOURCE = "mock"
    cfg.RIOT_API_KEY = ""

    assert not cfg.uses_live_api
    cfg.validate()


def test_rate_limit_must_be_positive():
    cfg = Settings()
    cfg.DATA_SOURCE = "mock"
    cfg.RATE_LIMIT_PER_SECOND = 0

    with pytest.raises(ValueError):
        cfg.validate()
