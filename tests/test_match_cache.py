import asyncio
import sqlite3
from contextlib import closing

import pytest

from infrastructure.repositories import MatchCacheRepository
from tests.conftest import match_payload


@pytest.fixture
def cache(tmp_path):
    return MatchCacheRepository(tmp_path / "cache" / "matches.sqlite")


def test_put_then_get(cache):
    payload = match_payload("NA1_1")

    async def scenario():
        await cache.put(payload, "na1")
        return await cache.get("NA1_1")

    entry = asyncio.run(scenario())

    assert cache.available
    assert entry.match_id == "NA1_1"
    assert entry.region == "na1"
    assert entry.payload == payload
    assert entry.cached_at.tzinfo is not None


def test_first_write_wins(cache):
    async def scenario():
        await cache.put(match_payload("NA1_1", gameDuration=100), "na1")
        await cache.put(match_payload("NA1_1", gameDuration=999), "na1")
        return await cache.get("NA1_1")

    entry = asyncio.run(scenario())

    assert entry.payload["info"]["gameDuration"] == 100
    assert cache.count() == 1


def test_get_many_returns_only_hits(cache):
    async def scenario():
        await cache.put_many([match_payload("KR_1"), match_payload("KR_2")], "kr")
        return await cache.get_many(["KR_2", "KR_3", "KR_1", "KR_2"])

    found = asyncio.run(scenario())

    assert set(found) == {"KR_1", "KR_2"}
    assert asyncio.run(cache.get_many([])) == {}
    assert asyncio.run(cache.get("KR_3")) is None


def test_payload_without_match_id_is_not_stored(cache):
    asyncio.run(cache.put({"info": {}}, "na1"))

    assert cache.count() == 0


def test_corrupt_rows_read_as_misses(cache):
    asyncio.run(cache.put(match_payload("EUW1_1"), "euw1"))
    with closing(sqlite3.connect(str(cache.db_path))) as conn:
        conn.execute(
            "INSERT INTO match_cache (match_id, region, data, cached_at) VALUES (?, ?, ?, ?)",
            ("EUW1_2", "euw1", "{not json", "2024-01-01T00:00:00+00:00"),
        )
        conn.commit()

    assert asyncio.run(cache.get("EUW1_2")) is None
    assert set(asyncio.run(cache.get_many(["EUW1_1", "EUW1_2"]))) == {"EUW1_1"}


def test_unusable_location_disables_cache(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    cache = MatchCacheRepository(blocker / "matches.sqlite")

    async def scenario():
        await cache.put(match_payload("NA1_1"), "na1")
        return await cache.get("NA1_1"), await cache.get_many(["NA1_1"])

    assert not cache.available
    assert asyncio.run(scenario()) == (None, {})
    assert cache.count() == 0


def test_storage_errors_degrade_to_misses(cache, monkeypatch):
    def broken(*_args):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(cache, "_get_sync", broken)
    monkeypatch.setattr(cache, "_get_many_sync", broken)
    monkeypatch.setattr(cache, "_put_sync", broken)

    async def scenario():
        await cache.put(match_payload("NA1_1"), "na1")
        return await cache.get("NA1_1"), await cache.get_many(["NA1_1"])

    assert asyncio.run(scenario()) == (None, {})


def test_put_many_stores_the_good_matches_around_a_bad_one(cache):
    good_1, good_2 = match_payload("NA1_1"), match_payload("NA1_2")

    async def scenario():
        await cache.put_many([good_1, {"info": {}}, good_2], "na1")
        return await cache.get_many(["NA1_1", "NA1_2"])

    found = asyncio.run(scenario())

    assert found["NA1_1"].payload == good_1
    assert found["NA1_2"].payload == good_2
    assert cache.count() == 2
