"""Error taxonomy shared by the API client, the data services and the CLI."""
from typing import Optional


class RiotStatsError(Exception):
    """Base class for every error raised on purpose by this package."""


class ConfigurationError(RiotStatsError):
    """Required configuration is missing or invalid."""


class InvalidRegionError(RiotStatsError, ValueError):
    """A region string does not name a known platform."""

    def __init__(self, region: str):
        super().__init__(f"Unknown region: {region!r}")
        self.region = region


class InvalidRiotIdError(RiotStatsError, ValueError):
    """A Riot ID is not in ``GameName-TagLine`` form."""

    def __init__(self, riot_id: str):
        super().__init__(f"Invalid Riot ID {riot_id!r}, expected GameName-TagLine")
        self.riot_id = riot_id


class RiotAPIError(RiotStatsError):
    """An upstream call failed. Carries the URL and, when known, the HTTP status."""

    def __init__(self, message: str, *, url: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NotFoundError(RiotAPIError):
    """The requested entity does not exist upstream (404). Never retried."""

    def __init__(self, url: str = ""):
        super().__init__(f"Not found: {url}", url=url, status_code=404)


class ForbiddenError(RiotAPIError):
    """The API key lacks permission for the endpoint (403). Never retried."""

    def __init__(self, url: str = ""):
        super().__init__(f"Forbidden: {url}", url=url, status_code=403)


class RateLimitExceededError(RiotAPIError):
    """Every retry against a 429 response was used up."""

    def __init__(self, url: str = "", attempts: int = 0):
        super().__init__(
            f"Rate limit exceeded after {attempts} attempts: {url}",
            url=url,
            status_code=429,
        )
        self.attempts = attempts


class UpstreamError(RiotAPIError):
    """Any other non-success response, or a transport failure (status_code is None)."""

    def __init__(self, status_code: Optional[int], body: str = "", url: str = ""):
        label = status_code if status_code is not None else "transport error"
        super().__init__(f"Upstream error ({label}) for {url}: {body[:200]}", url=url, status_code=status_code)
        self.body = body
