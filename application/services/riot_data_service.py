"""Live data service backed by the Riot Games API."""
from __future__ import annotations

import logging
from typing import List, Optional

from core.logging import log_context
from domain.entities import (
    ChampionMastery,
    LeagueEntry,
    LiveGameRecord,
    MatchRecord,
    Summoner,
)
from domain.enums import Region
from domain.errors import ForbiddenError, NotFoundError
from domain.interfaces import IDataService
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class RiotDataService(IDataService):
    """
    IDataService over RiotAPIClient.

    Primary lookups (account, match ids, match detail) propagate every error
    unchanged. Secondary enrichment calls absorb ForbiddenError into a
    documented default and log a warning:

      - summoner-v4 icon/level → profile icon 1, level 0
      - ranked entries         → []
      - champion masteries     → []
      - live game              → None

    Match lookups share the client's cache, and writes to it never hold up
    the caller.
    """

    def __init__(self, client: RiotAPIClient):
        self.client = client

    async def get_summoner(self, region: str, game_name: str, tag_line: str) -> Summoner:
        r = Region.from_string(region)
        with log_context(region=r.value, riot_id=f"{game_name}#{tag_line}"):
            account = await self.client.get_account_by_riot_id(r, game_name, tag_line)
            try:
                summoner = await self.client.get_summoner_by_puuid(r, account["puuid"])
            except ForbiddenError:
                logger.warning("Summoner-v4 forbidden; using default profile icon and level")
                summoner = None
            return Summoner.from_api(account, summoner)

    async def get_ranked_stats(self, region: str, puuid: str) -> List[LeagueEntry]:
        r = Region.from_string(region)
        with log_context(region=r.value, puuid=puuid):
            try:
                entries = await self.client.get_league_entries_by_puuid(r, puuid)
            except ForbiddenError:
                logger.warning("League-v4 forbidden; returning no ranked entries")
                return []
            return [LeagueEntry.from_api(e) for e in entries]

    async def get_match_history(
        self, region: str, puuid: str, count: int = 20, start: int = 0
    ) -> List[str]:
        r = Region.from_string(region)
        with log_context(region=r.value, puuid=puuid):
            return await self.client.get_match_ids_by_puuid(r, puuid, count=count, start=start)

    async def get_match_details(self, region: str, match_id: str) -> MatchRecord:
        r = Region.from_string(region)
        with log_context(region=r.value, match_id=match_id):
            cache = self.client.match_cache
            if cache is not None:
                cached = await cache.get(match_id)
                if cached is not None:
                    return cached.payload
            match = await self.client.get_match_by_id(r, match_id)
            self.client.cache_in_background([match], r)
            return match

    async def get_match_details_batch(self, region: str, match_ids: List[str]) -> List[MatchRecord]:
        r = Region.from_string(region)
        with log_context(region=r.value):
            return await self.client.get_match_details_batch(r, list(match_ids))

    async def get_live_game(self, region: str, puuid: str) -> Optional[LiveGameRecord]:
        r = Region.from_string(region)
        with log_context(region=r.value, puuid=puuid):
            try:
                return await self.client.get_active_game_by_puuid(r, puuid)
            except NotFoundError:
                return None
            except ForbiddenError:
                logger.warning("Spectator-v5 forbidden; reporting no live game")
                return None

    async def get_champion_masteries(self, region: str, puuid: str) -> List[ChampionMastery]:
        r = Region.from_string(region)
        with log_context(region=r.value, puuid=puuid):
            try:
                masteries = await self.client.get_champion_masteries_by_puuid(r, puuid)
            except ForbiddenError:
                logger.warning("Champion-mastery-v4 forbidden; returning no masteries")
                return []
            items = [ChampionMastery.from_api(m) for m in masteries]
            items.sort(key=lambda m: m.champion_points, reverse=True)
            return items

    async def aclose(self) -> None:
        await self.client.aclose()
