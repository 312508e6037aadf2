"""Application services root exports."""
from .riot_data_service import RiotDataService
from .fixture_data_service import FixtureDataService
from .factory import get_data_service, build_riot_client

__all__ = [
    "RiotDataService",
    "FixtureDataService",
    "get_data_service",
    "build_riot_client",
]
