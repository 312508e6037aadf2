"""Domain interfaces."""
from .repository import IMatchCache
from .data_service import IDataService

__all__ = [
    'IMatchCache',
    'IDataService',
]
