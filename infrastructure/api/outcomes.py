"""Classification of raw HTTP responses into typed request outcomes."""
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

from domain.errors import ForbiddenError, NotFoundError, UpstreamError


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Forbidden:
    pass


@dataclass(frozen=True)
class RateLimited:
    retry_after_seconds: int


@dataclass(frozen=True)
class OtherFailure:
    status_code: int
    body: str


UpstreamRequestOutcome = Union[Success, NotFound, Forbidden, RateLimited, OtherFailure]


def parse_retry_after(value: Optional[str], fallback: int) -> int:
    """Whole seconds from a Retry-After header; ``fallback`` when absent or unusable."""
    if value is None:
        return fallback
    try:
        seconds = int(value.strip())
    except ValueError:
        return fallback
    return seconds if seconds >= 0 else fallback


def classify_response(response: httpx.Response, retry_after_fallback: int = 2) -> UpstreamRequestOutcome:
    status = response.status_code
    if 200 <= status < 300:
        return Success(response.json() if response.content else None)
    if status == 404:
        return NotFound()
    if status == 403:
        return Forbidden()
    if status == 429:
        return RateLimited(parse_retry_after(response.headers.get("Retry-After"), retry_after_fallback))
    return OtherFailure(status, response.text)


def raise_for_outcome(outcome: UpstreamRequestOutcome, url: str) -> None:
    """Raise the error matching a terminal failure outcome. Success and RateLimited pass through."""
    if isinstance(outcome, NotFound):
        raise NotFoundError(url)
    if isinstance(outcome, Forbidden):
        raise ForbiddenError(url)
    if isinstance(outcome, OtherFailure):
        raise UpstreamError(outcome.status_code, outcome.body, url)
