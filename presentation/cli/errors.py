"""Mapping from core errors to what a user is shown."""
from __future__ import annotations

from dataclasses import dataclass

from domain.errors import (
    ConfigurationError,
    ForbiddenError,
    InvalidRegionError,
    InvalidRiotIdError,
    NotFoundError,
    RateLimitExceededError,
)


@dataclass(frozen=True)
class ErrorView:
    code: str
    status: int
    message: str

    def to_dict(self) -> dict:
        return {'error': self.message, 'code': self.code}


def describe_error(exc: BaseException) -> ErrorView:
    if isinstance(exc, NotFoundError):
        return ErrorView("NOT_FOUND", 404, "Not found. Check the Riot ID or match id and the region.")
    if isinstance(exc, RateLimitExceededError):
        return ErrorView("RATE_LIMITED", 429, "Too many requests. Please try again in a moment.")
    if isinstance(exc, ForbiddenError):
        return ErrorView("FORBIDDEN", 503, "Service temporarily unavailable. The API key may have expired.")
    if isinstance(exc, InvalidRiotIdError):
        return ErrorView("BAD_REQUEST", 400, "Invalid name format. Expected GameName-TagLine.")
    if isinstance(exc, InvalidRegionError):
        return ErrorView("BAD_REQUEST", 400, f"Unknown region '{exc.region}'.")
    if isinstance(exc, ConfigurationError):
        return ErrorView("NOT_CONFIGURED", 500, str(exc))
    return ErrorView("INTERNAL", 500, "Something went wrong. Please try again later.")
