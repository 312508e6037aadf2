"""Champion mastery entity."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ChampionMastery:
    puuid: str
    champion_id: int
    champion_level: int
    champion_points: int
    last_play_time: int  # Unix timestamp milliseconds

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ChampionMastery":
        return cls(
            puuid=data.get('puuid', ''),
            champion_id=data.get('championId', 0),
            champion_level=data.get('championLevel', 0),
            champion_points=data.get('championPoints', 0),
            last_play_time=data.get('lastPlayTime', 0),
        )

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'championId': self.champion_id,
            'championLevel': self.champion_level,
            'championPoints': self.champion_points,
            'lastPlayTime': self.last_play_time,
        }
