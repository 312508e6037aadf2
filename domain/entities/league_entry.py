"""Ranked league entry for one queue."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..enums import QueueType, Rank


@dataclass
class LeagueEntry:
    """One row of league-v4 ``entries/by-puuid``."""

    queue_type: str
    tier: str
    rank: str
    league_points: int
    wins: int
    losses: int
    league_id: str = ''
    hot_streak: bool = False
    veteran: bool = False
    fresh_blood: bool = False
    inactive: bool = False

    @property
    def queue(self) -> Optional[QueueType]:
        return QueueType.from_string(self.queue_type)

    @property
    def tier_rank(self) -> Optional[Rank]:
        return Rank.from_string(self.tier)

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win rate as a percentage."""
        if self.games_played == 0:
            return 0.0
        return (self.wins / self.games_played) * 100

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "LeagueEntry":
        return cls(
            queue_type=data.get('queueType', ''),
            tier=data.get('tier', ''),
            rank=data.get('rank', ''),
            league_points=data.get('leaguePoints', 0),
            wins=data.get('wins', 0),
            losses=data.get('losses', 0),
            league_id=data.get('leagueId', ''),
            hot_streak=data.get('hotStreak', False),
            veteran=data.get('veteran', False),
            fresh_blood=data.get('freshBlood', False),
            inactive=data.get('inactive', False),
        )

    def to_dict(self) -> dict:
        return {
            'queueType': self.queue_type,
            'tier': self.tier,
            'rank': self.rank,
            'leaguePoints': self.league_points,
            'wins': self.wins,
            'losses': self.losses,
            'leagueId': self.league_id,
            'hotStreak': self.hot_streak,
            'veteran': self.veteran,
            'freshBlood': self.fresh_blood,
            'inactive': self.inactive,
            'winRate': round(self.win_rate, 2),
        }
