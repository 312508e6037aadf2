"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import TokenBucket
from .outcomes import (
    UpstreamRequestOutcome, Success, NotFound, Forbidden, RateLimited, OtherFailure,
    classify_response,
)

__all__ = [
    'RiotAPIClient',
    'TokenBucket',
    'UpstreamRequestOutcome',
    'Success',
    'NotFound',
    'Forbidden',
    'RateLimited',
    'OtherFailure',
    'classify_response',
]
