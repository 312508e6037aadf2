"""Data service interface - the operation set the rest of the app calls."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import ChampionMastery, LeagueEntry, LiveGameRecord, MatchRecord, Summoner


class IDataService(ABC):
    """Abstraction over League of Legends data retrieval.

    Two implementations exist:
      - FixtureDataService - deterministic fake data for development
      - RiotDataService    - real Riot Games API (requires RIOT_API_KEY)

    Both raise the same error types from ``domain.errors``.
    """

    @abstractmethod
    async def get_summoner(self, region: str, game_name: str, tag_line: str) -> Summoner:
        """Look up a summoner by Riot ID (game name + tag line)."""
        pass

    @abstractmethod
    async def get_ranked_stats(self, region: str, puuid: str) -> List[LeagueEntry]:
        """Ranked entries (solo/duo + flex) for a puuid."""
        pass

    @abstractmethod
    async def get_match_history(
        self, region: str, puuid: str, count: int = 20, start: int = 0
    ) -> List[str]:
        """Recent match ids, newest first."""
        pass

    @abstractmethod
    async def get_match_details(self, region: str, match_id: str) -> MatchRecord:
        """Full match record for one id."""
        pass

    @abstractmethod
    async def get_match_details_batch(self, region: str, match_ids: List[str]) -> List[MatchRecord]:
        """Match records in the order of ``match_ids``; unresolvable ids are dropped."""
        pass

    @abstractmethod
    async def get_live_game(self, region: str, puuid: str) -> Optional[LiveGameRecord]:
        """The in-progress game, or None when the player is not in one."""
        pass

    @abstractmethod
    async def get_champion_masteries(self, region: str, puuid: str) -> List[ChampionMastery]:
        """Champion mastery list, highest points first."""
        pass

    async def aclose(self) -> None:
        """Release network resources; a no-op for backends that hold none."""
        return None
