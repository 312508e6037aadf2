import asyncio

import pytest

from application.services import FixtureDataService
from application.services.fixture_data_service import LIVE_PUUID
from domain.errors import InvalidRegionError, NotFoundError


@pytest.fixture
def service():
    return FixtureDataService()


def test_known_summoner(service):
    summoner = asyncio.run(service.get_summoner("kr", "faker", "kr1"))

    assert summoner.riot_id == "Faker#KR1"
    assert summoner.puuid == LIVE_PUUID
    assert summoner.summoner_level == 782


def test_unknown_summoner_is_stable(service):
    first = asyncio.run(service.get_summoner("euw1", "Someone", "EUW"))
    second = asyncio.run(service.get_summoner("euw1", "Someone", "EUW"))

    assert first == second
    assert first.game_name == "Someone"


def test_blank_riot_id_is_not_found(service):
    with pytest.raises(NotFoundError):
        asyncio.run(service.get_summoner("na1", " ", "NA1"))


def test_unknown_region_is_rejected(service):
    with pytest.raises(InvalidRegionError):
        asyncio.run(service.get_summoner("moon", "Faker", "KR1"))


def test_known_summoner_ranked_entry(service):
    entries = asyncio.run(service.get_ranked_stats("kr", LIVE_PUUID))

    solo = entries[0]
    assert (solo.queue_type, solo.tier, solo.rank, solo.league_points) == (
        "RANKED_SOLO_5x5", "CHALLENGER", "I", 1247)
    assert entries == asyncio.run(service.get_ranked_stats("kr", LIVE_PUUID))


def test_match_history_uses_region_prefix(service):
    ids = asyncio.run(service.get_match_history("na1", "p-1", count=7, start=3))

    assert len(ids) == 7
    assert all(i.startswith("NA_") for i in ids)
    assert ids == asyncio.run(service.get_match_history("na1", "p-1", count=7, start=3))


def test_match_details_are_deterministic(service):
    first = asyncio.run(service.get_match_details("kr", "KR_5000123456"))
    second = asyncio.run(service.get_match_details("kr", "KR_5000123456"))

    assert first == second
    assert first["metadata"]["matchId"] == "KR_5000123456"
    assert len(first["info"]["participants"]) == 10


def test_malformed_match_id_is_not_found(service):
    with pytest.raises(NotFoundError):
        asyncio.run(service.get_match_details("kr", "not-a-match"))


def test_batch_drops_malformed_ids_and_keeps_order(service):
    matches = asyncio.run(service.get_match_details_batch("kr", ["KR_2", "bogus", "KR_1"]))

    assert [m["metadata"]["matchId"] for m in matches] == ["KR_2", "KR_1"]


def test_only_one_player_is_in_game(service):
    live = asyncio.run(service.get_live_game("kr", LIVE_PUUID))

    assert live["participants"][0]["puuid"] == LIVE_PUUID
    assert asyncio.run(service.get_live_game("kr", "someone-else")) is None


def test_masteries_sorted_descending(service):
    masteries = asyncio.run(service.get_champion_masteries("kr", LIVE_PUUID))
    points = [m.champion_points for m in masteries]

    assert points == sorted(points, reverse=True)
    assert masteries == asyncio.run(service.get_champion_masteries("kr", LIVE_PUUID))
