"""Use case for loading a summoner's recent matches."""
from __future__ import annotations

import logging
from typing import List

from config import settings
from domain.entities import MatchRecord
from domain.interfaces import IDataService

logger = logging.getLogger(__name__)


class LoadMatchHistoryUseCase:
    """Recent match ids for a puuid, then their details in one cache-aware batch."""

    def __init__(self, data_service: IDataService):
        self.data_service = data_service

    async def execute(self, region: str, puuid: str, count: int | None = None) -> List[MatchRecord]:
        count = count or settings.MATCH_HISTORY_COUNT
        match_ids = await self.data_service.get_match_history(region, puuid, count=count)
        if not match_ids:
            return []
        matches = await self.data_service.get_match_details_batch(region, match_ids)
        if len(matches) < len(match_ids):
            logger.warning(f"Resolved {len(matches)}/{len(match_ids)} matches")
        return matches
