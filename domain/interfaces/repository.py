"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..entities import CachedMatch, MatchRecord


class IMatchCache(ABC):
    """Best-effort store of immutable match payloads keyed by match id.

    Implementations never raise to their callers: a storage failure reads as
    a miss and a failed write is dropped.
    """

    @abstractmethod
    async def get(self, match_id: str) -> Optional[CachedMatch]:
        """Point lookup."""
        pass

    @abstractmethod
    async def get_many(self, match_ids: Iterable[str]) -> Dict[str, CachedMatch]:
        """Return the entries found; missing ids are simply absent."""
        pass

    @abstractmethod
    async def put(self, match: MatchRecord, region: str) -> None:
        """Insert if absent. An existing entry is never overwritten."""
        pass

    @abstractmethod
    async def put_many(self, matches: Iterable[MatchRecord], region: str) -> None:
        """Apply ``put`` to each match independently."""
        pass
