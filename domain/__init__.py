"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    Summoner, LeagueEntry, ChampionMastery, CachedMatch,
    MatchRecord, LiveGameRecord, match_id_of,
)
from .enums import Region, QueueType, Rank
from .errors import (
    RiotStatsError, ConfigurationError, InvalidRegionError, InvalidRiotIdError,
    RiotAPIError, NotFoundError, ForbiddenError, RateLimitExceededError, UpstreamError,
)
from .interfaces import IMatchCache, IDataService

__all__ = [
    # Entities
    'Summoner',
    'LeagueEntry',
    'ChampionMastery',
    'CachedMatch',
    'MatchRecord',
    'LiveGameRecord',
    'match_id_of',
    # Enums
    'Region',
    'QueueType',
    'Rank',
    # Errors
    'RiotStatsError',
    'ConfigurationError',
    'InvalidRegionError',
    'InvalidRiotIdError',
    'RiotAPIError',
    'NotFoundError',
    'ForbiddenError',
    'RateLimitExceededError',
    'UpstreamError',
    # Interfaces
    'IMatchCache',
    'IDataService',
]
