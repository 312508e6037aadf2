"""Infrastructure repositories."""
from .match_cache_repository import MatchCacheRepository

__all__ = [
    'MatchCacheRepository',
]
