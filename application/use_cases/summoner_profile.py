"""Use case for loading a summoner's profile page data."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import unquote

from domain.entities import LeagueEntry, Summoner
from domain.enums import QueueType
from domain.errors import InvalidRiotIdError
from domain.interfaces import IDataService

logger = logging.getLogger(__name__)


def parse_riot_id(riot_id: str) -> Tuple[str, str]:
    """
    Split ``GameName-TagLine`` on the last hyphen.

    Game names may contain hyphens, tag lines may not. Both halves are
    URL-decoded. Raises InvalidRiotIdError when either half would be empty.
    """
    value = (riot_id or "").strip()
    cut = value.rfind("-")
    if cut <= 0 or cut == len(value) - 1:
        raise InvalidRiotIdError(riot_id)
    return unquote(value[:cut]), unquote(value[cut + 1:])


@dataclass
class SummonerProfile:
    summoner: Summoner
    ranked_entries: List[LeagueEntry] = field(default_factory=list)

    def entry_for(self, queue: QueueType) -> Optional[LeagueEntry]:
        return next((e for e in self.ranked_entries if e.queue_type == queue.value), None)

    def to_dict(self) -> dict:
        return {
            'summoner': self.summoner.to_dict(),
            'rankedStats': [e.to_dict() for e in self.ranked_entries],
        }


class LoadSummonerProfileUseCase:
    """Resolve a Riot ID, then fetch its ranked entries.

    Resolution errors (NotFoundError, ForbiddenError, ...) propagate; the
    ranked lookup is already degraded to an empty list by the data service.
    """

    def __init__(self, data_service: IDataService):
        self.data_service = data_service

    async def execute(self, region: str, riot_id: str) -> SummonerProfile:
        game_name, tag_line = parse_riot_id(riot_id)
        summoner = await self.data_service.get_summoner(region, game_name, tag_line)
        ranked = await self.data_service.get_ranked_stats(region, summoner.puuid)
        logger.info(f"Loaded profile {summoner.riot_id} ({len(ranked)} ranked entries)")
        return SummonerProfile(summoner=summoner, ranked_entries=ranked)
