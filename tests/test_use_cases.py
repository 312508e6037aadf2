import asyncio

import pytest

from application.services import FixtureDataService
from application.use_cases import LoadMatchHistoryUseCase, LoadSummonerProfileUseCase, parse_riot_id
from domain.enums import QueueType
from domain.errors import InvalidRiotIdError


@pytest.mark.parametrize("raw, expected", [
    ("Faker-KR1", ("Faker", "KR1")),
    ("Some-Name-EUW", ("Some-Name", "EUW")),
    ("Hide%20on%20bush-KR1", ("Hide on bush", "KR1")),
])
def test_parse_riot_id(raw, expected):
    assert parse_riot_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "Faker", "-KR1", "Faker-"])
def test_parse_riot_id_rejects_malformed(raw):
    with pytest.raises(InvalidRiotIdError):
        parse_riot_id(raw)


def test_profile_use_case():
    profile = asyncio.run(LoadSummonerProfileUseCase(FixtureDataService()).execute("kr", "Faker-KR1"))

    assert profile.summoner.riot_id == "Faker#KR1"
    assert profile.entry_for(QueueType.RANKED_SOLO_5x5).tier == "CHALLENGER"
    assert profile.to_dict()["summoner"]["summonerLevel"] == 782


def test_match_history_use_case():
    matches = asyncio.run(LoadMatchHistoryUseCase(FixtureDataService()).execute("euw1", "p-1", count=4))

    assert len(matches) == 4
    assert all(m["metadata"]["matchId"].startswith("EUW_") for m in matches)


def test_match_history_default_count(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "MATCH_HISTORY_COUNT", 3)
    matches = asyncio.run(LoadMatchHistoryUseCase(FixtureDataService()).execute("na1", "p-1"))

    assert len(matches) == 3
