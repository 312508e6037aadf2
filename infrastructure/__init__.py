"""Infrastructure layer - API client, rate limiter and match cache."""
from .api import RiotAPIClient, TokenBucket
from .repositories import MatchCacheRepository

__all__ = [
    'RiotAPIClient',
    'TokenBucket',
    'MatchCacheRepository',
]
