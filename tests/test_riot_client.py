import asyncio

import httpx
import pytest

from domain.enums import Region
from domain.errors import ForbiddenError, NotFoundError, RateLimitExceededError, UpstreamError


def _calls(handler_log):
    def handler(request):
        handler_log.append(request)
        return httpx.Response(200, json={"puuid": "p-1", "gameName": "Faker", "tagLine": "KR1"})

    return handler


def test_account_lookup_uses_regional_host_and_api_key(make_client):
    seen = []
    client = make_client(_calls(seen))

    async def scenario():
        async with client:
            return await client.get_account_by_riot_id(Region.KR, "Hide on bush", "KR1")

    account = asyncio.run(scenario())

    assert account["puuid"] == "p-1"
    request = seen[0]
    assert request.url.host == "asia.api.riotgames.com"
    assert request.url.raw_path == b"/riot/account/v1/accounts/by-riot-id/Hide%20on%20bush/KR1"
    assert request.headers["X-Riot-Token"] == "test-key"


def test_summoner_lookup_uses_platform_host(make_client):
    seen = []
    client = make_client(_calls(seen))

    asyncio.run(client.get_summoner_by_puuid(Region.EUW1, "p-1"))

    assert seen[0].url.host == "euw1.api.riotgames.com"
    assert seen[0].url.path == "/lol/summoner/v4/summoners/by-puuid/p-1"


@pytest.mark.parametrize("status, error", [(404, NotFoundError), (403, ForbiddenError)])
def test_not_found_and_forbidden_are_not_retried(make_client, sleeps, status, error):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(status)

    client = make_client(handler)

    with pytest.raises(error) as info:
        asyncio.run(client.get_match_by_id(Region.NA1, "NA1_1"))

    assert info.value.status_code == status
    assert len(seen) == 1
    assert sleeps.calls == []


def test_rate_limited_requests_give_up_after_max_retries(make_client, sleeps):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(429)

    client = make_client(handler)

    with pytest.raises(RateLimitExceededError) as info:
        asyncio.run(client.get_match_by_id(Region.NA1, "NA1_1"))

    assert len(seen) == 3
    assert info.value.attempts == 3
    assert sleeps.calls == [2, 2, 2]
    assert client.rate_limiter.acquired == 3


def test_retry_after_header_is_honoured(make_client, sleeps):
    responses = iter([
        httpx.Response(429, headers={"Retry-After": "7"}),
        httpx.Response(200, json=["NA1_1", "NA1_2"]),
    ])
    client = make_client(lambda request: next(responses))

    ids = asyncio.run(client.get_match_ids_by_puuid(Region.NA1, "p-1"))

    assert ids == ["NA1_1", "NA1_2"]
    assert sleeps.calls == [7]
    assert client.rate_limiter.acquired == 2


def test_server_error_becomes_upstream_error(make_client):
    client = make_client(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(UpstreamError) as info:
        asyncio.run(client.get_league_entries_by_puuid(Region.NA1, "p-1"))

    assert info.value.status_code == 503
    assert info.value.body == "maintenance"


def test_transport_failure_becomes_upstream_error(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(UpstreamError) as info:
        asyncio.run(client.get_match_by_id(Region.NA1, "NA1_1"))

    assert info.value.status_code is None
    assert len(seen) == 1


def test_match_id_count_is_clamped(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    client = make_client(handler)

    async def scenario():
        await client.get_match_ids_by_puuid(Region.NA1, "p-1", count=500, start=10)
        await client.get_match_ids_by_puuid(Region.NA1, "p-1", count=0)

    asyncio.run(scenario())

    assert seen[0].url.host == "americas.api.riotgames.com"
    assert seen[0].url.params["count"] == "100"
    assert seen[0].url.params["start"] == "10"
    assert seen[1].url.params["count"] == "1"


def test_empty_masteries_response_is_an_empty_list(make_client):
    client = make_client(lambda request: httpx.Response(200, json={}))

    assert asyncio.run(client.get_champion_masteries_by_puuid(Region.KR, "p-1")) == []
