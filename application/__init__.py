"""Application layer - Data services and use cases."""
from .services import RiotDataService, FixtureDataService, get_data_service
from .use_cases import LoadSummonerProfileUseCase, LoadMatchHistoryUseCase

__all__ = [
    'RiotDataService',
    'FixtureDataService',
    'get_data_service',
    'LoadSummonerProfileUseCase',
    'LoadMatchHistoryUseCase',
]
