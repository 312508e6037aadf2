"""Application use cases."""
from .summoner_profile import LoadSummonerProfileUseCase, SummonerProfile, parse_riot_id
from .match_history import LoadMatchHistoryUseCase

__all__ = [
    'LoadSummonerProfileUseCase',
    'SummonerProfile',
    'parse_riot_id',
    'LoadMatchHistoryUseCase',
]
