"""Summoner entity representing a player account."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_PROFILE_ICON_ID = 1
DEFAULT_SUMMONER_LEVEL = 0


@dataclass
class Summoner:
    """A player resolved from a Riot ID (``game_name#tag_line``)."""

    puuid: str
    game_name: str
    tag_line: str
    profile_icon_id: int = DEFAULT_PROFILE_ICON_ID
    summoner_level: int = DEFAULT_SUMMONER_LEVEL

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"

    @classmethod
    def from_api(cls, account: Dict[str, Any], summoner: Optional[Dict[str, Any]] = None) -> "Summoner":
        """Build from an account-v1 payload plus an optional summoner-v4 payload."""
        summoner = summoner or {}
        return cls(
            puuid=account['puuid'],
            game_name=account.get('gameName', ''),
            tag_line=account.get('tagLine', ''),
            profile_icon_id=summoner.get('profileIconId', DEFAULT_PROFILE_ICON_ID),
            summoner_level=summoner.get('summonerLevel', DEFAULT_SUMMONER_LEVEL),
        )

    def to_dict(self) -> dict:
        """Convert summoner to the upstream camelCase shape."""
        return {
            'puuid': self.puuid,
            'gameName': self.game_name,
            'tagLine': self.tag_line,
            'profileIconId': self.profile_icon_id,
            'summonerLevel': self.summoner_level,
        }
