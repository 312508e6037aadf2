"""Domain entities."""
from .summoner import Summoner, DEFAULT_PROFILE_ICON_ID, DEFAULT_SUMMONER_LEVEL
from .league_entry import LeagueEntry
from .champion_mastery import ChampionMastery
from .match import CachedMatch, MatchRecord, LiveGameRecord, match_id_of

__all__ = [
    'Summoner',
    'DEFAULT_PROFILE_ICON_ID',
    'DEFAULT_SUMMONER_LEVEL',
    'LeagueEntry',
    'ChampionMastery',
    'CachedMatch',
    'MatchRecord',
    'LiveGameRecord',
    'match_id_of',
]
