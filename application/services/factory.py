"""Backend selection for the data service."""
from __future__ import annotations

import logging
from typing import Optional

from config import Settings, settings as default_settings
from domain.errors import ConfigurationError
from domain.interfaces import IDataService
from infrastructure.api import RiotAPIClient, TokenBucket
from infrastructure.repositories import MatchCacheRepository
from .fixture_data_service import FixtureDataService
from .riot_data_service import RiotDataService

logger = logging.getLogger(__name__)


def build_riot_client(cfg: Settings) -> RiotAPIClient:
    """Wire the process-wide rate limiter and match cache into one client."""
    if not cfg.RIOT_API_KEY:
        raise ConfigurationError("Riot API not configured. Set RIOT_API_KEY environment variable.")
    cache = MatchCacheRepository(cfg.MATCH_CACHE_PATH) if cfg.MATCH_CACHE_ENABLED else None
    return RiotAPIClient(
        cfg.RIOT_API_KEY,
        rate_limiter=TokenBucket(cfg.RATE_LIMIT_PER_SECOND),
        match_cache=cache,
        max_retries=cfg.MAX_RETRIES,
        retry_after_fallback=cfg.RETRY_AFTER_FALLBACK_SECONDS,
        match_batch_size=cfg.MATCH_BATCH_SIZE,
        timeout=cfg.REQUEST_TIMEOUT,
    )


def get_data_service(
    cfg: Optional[Settings] = None,
    *,
    client: Optional[RiotAPIClient] = None,
) -> IDataService:
    """
    Pick the backend from ``DATA_SOURCE``:

      "mock"        → FixtureDataService (default)
      anything else → RiotDataService (requires RIOT_API_KEY)

    Call once at startup and pass the result around.
    """
    cfg = cfg or default_settings
    try:
        cfg.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    if not cfg.uses_live_api:
        logger.info("Data source: fixtures")
        return FixtureDataService()

    logger.info("Data source: Riot API")
    return RiotDataService(client or build_riot_client(cfg))
