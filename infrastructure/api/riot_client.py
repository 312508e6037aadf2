"""Riot Games API client."""
import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Set
from urllib.parse import quote

import httpx

from config import settings
from domain.entities import MatchRecord
from domain.enums import Region
from domain.errors import RateLimitExceededError, UpstreamError
from domain.interfaces import IMatchCache
from .outcomes import RateLimited, Success, classify_response, raise_for_outcome
from .rate_limiter import TokenBucket

logger = logging.getLogger(__name__)

MAX_MATCH_IDS_PER_CALL = 100


class RiotAPIClient:
    """Asynchronous Riot API client.

    Every attempt takes a token from the shared bucket first. Responses map to
    typed errors: 404 → NotFoundError, 403 → ForbiddenError, other failures →
    UpstreamError. Only 429 is retried, after sleeping the server's
    Retry-After, and at most ``max_retries`` attempts are made in total.
    """

    def __init__(
        self,
        api_key: str,
        *,
        rate_limiter: Optional[TokenBucket] = None,
        match_cache: Optional[IMatchCache] = None,
        max_retries: Optional[int] = None,
        retry_after_fallback: Optional[int] = None,
        match_batch_size: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.rate_limiter = rate_limiter or TokenBucket(settings.RATE_LIMIT_PER_SECOND)
        self.match_cache = match_cache
        self.max_retries = max_retries if max_retries is not None else settings.MAX_RETRIES
        self.retry_after_fallback = (
            retry_after_fallback if retry_after_fallback is not None
            else settings.RETRY_AFTER_FALLBACK_SECONDS
        )
        self.match_batch_size = match_batch_size or settings.MATCH_BATCH_SIZE
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport
        self._sleep = asyncio.sleep
        self._cache_writes: Set[asyncio.Task] = set()

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def open(self) -> None:
        if self.session is not None:
            return
        http2 = False
        if self._transport is None:
            try:
                import h2  # noqa: F401
                http2 = True
            except ImportError:
                pass
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            http2=http2,
            transport=self._transport,
        )

    async def aclose(self) -> None:
        await self.wait_for_cache_writes()
        if self.session:
            await self.session.aclose()
            self.session = None

    # ── Match cache write-behind ───────────────────────────────────────

    def cache_in_background(self, matches: Iterable[MatchRecord], region: Region) -> None:
        """Schedule a cache write without making the caller wait for it."""
        if self.match_cache is None:
            return
        task = asyncio.get_running_loop().create_task(
            self.match_cache.put_many(list(matches), region.value)
        )
        self._cache_writes.add(task)
        task.add_done_callback(self._on_cache_write_done)

    def _on_cache_write_done(self, task: asyncio.Task) -> None:
        self._cache_writes.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Match cache write failed: {task.exception()}")

    async def wait_for_cache_writes(self) -> None:
        """Block until every scheduled cache write has finished."""
        if self._cache_writes:
            await asyncio.gather(*list(self._cache_writes), return_exceptions=True)

    def _get_platform_url(self, region: Region) -> str:
        return f"https://{region.platform_route}.api.riotgames.com"

    def _get_regional_url(self, region: Region) -> str:
        return f"https://{region.regional_route}.api.riotgames.com"

    async def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        if self.session is None:
            await self.open()

        retries_left = self.max_retries
        attempts = 0
        while True:
            await self.rate_limiter.acquire()
            attempts += 1
            try:
                response = await self.session.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.error(f"Network error for {url}: {exc}")
                raise UpstreamError(None, str(exc), url) from exc

            outcome = classify_response(response, self.retry_after_fallback)

            if isinstance(outcome, Success):
                return outcome.payload

            if isinstance(outcome, RateLimited):
                logger.warning(
                    f"429 rate-limited, waiting {outcome.retry_after_seconds}s "
                    f"(attempt {attempts}/{self.max_retries})"
                )
                await self._sleep(outcome.retry_after_seconds)
                retries_left -= 1
                if retries_left <= 0:
                    raise RateLimitExceededError(url, attempts)
                continue

            if response.status_code >= 500:
                logger.warning(f"HTTP {response.status_code} for {url}")
            raise_for_outcome(outcome, url)

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, region: Region, game_name: str, tag_line: str) -> Dict:
        base = self._get_regional_url(region)
        path = f"/riot/account/v1/accounts/by-riot-id/{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        return await self._make_request(base + path)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, region: Region, puuid: str) -> Dict:
        base = self._get_platform_url(region)
        return await self._make_request(f"{base}/lol/summoner/v4/summoners/by-puuid/{puuid}")

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_puuid(self, region: Region, puuid: str) -> List[Dict]:
        base = self._get_platform_url(region)
        result = await self._make_request(f"{base}/lol/league/v4/entries/by-puuid/{puuid}")
        return result if isinstance(result, list) else []

    # ── Champion mastery API ───────────────────────────────────────────

    async def get_champion_masteries_by_puuid(self, region: Region, puuid: str) -> List[Dict]:
        base = self._get_platform_url(region)
        result = await self._make_request(
            f"{base}/lol/champion-mastery/v4/champion-masteries/by-puuid/{puuid}"
        )
        return result if isinstance(result, list) else []

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_active_game_by_puuid(self, region: Region, puuid: str) -> Dict:
        """Raises NotFoundError when the player is not in a game."""
        base = self._get_platform_url(region)
        return await self._make_request(f"{base}/lol/spectator/v5/active-games/by-summoner/{puuid}")

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        count: int = 20,
        start: int = 0,
    ) -> List[str]:
        base = self._get_regional_url(region)
        params = {
            "start": max(0, start),
            "count": min(max(1, count), MAX_MATCH_IDS_PER_CALL),
        }
        result = await self._make_request(f"{base}/lol/match/v5/matches/by-puuid/{puuid}/ids", params)
        return result if isinstance(result, list) else []

    async def get_match_by_id(self, region: Region, match_id: str) -> MatchRecord:
        base = self._get_regional_url(region)
        return await self._make_request(f"{base}/lol/match/v5/matches/{match_id}")

    async def get_match_details_batch(self, region: Region, match_ids: List[str]) -> List[MatchRecord]:
        """
        Resolve many matches, cache first.

        Uncached ids are fetched in sequential chunks of ``match_batch_size``
        concurrent requests; fresh matches are written back to the cache in the
        background.
        The result follows the order of ``match_ids``, and ids that could
        not be resolved are left out.
        """
        if not match_ids:
            return []

        resolved: Dict[str, MatchRecord] = {}
        if self.match_cache is not None:
            cached = await self.match_cache.get_many(set(match_ids))
            resolved.update({mid: entry.payload for mid, entry in cached.items()})

        uncached = [mid for mid in dict.fromkeys(match_ids) if mid not in resolved]
        if resolved:
            logger.debug(f"Match cache: {len(resolved)} hit(s), {len(uncached)} miss(es)")

        fresh: List[MatchRecord] = []
        for i in range(0, len(uncached), self.match_batch_size):
            chunk = uncached[i:i + self.match_batch_size]
            results = await asyncio.gather(
                *(self.get_match_by_id(region, mid) for mid in chunk),
                return_exceptions=True,
            )
            for mid, res in zip(chunk, results):
                if isinstance(res, Exception):
                    logger.warning(f"Dropping match {mid} from batch: {res}")
                    continue
                if isinstance(res, BaseException):
                    raise res
                if not res:
                    continue
                resolved[mid] = res
                fresh.append(res)

        if fresh:
            self.cache_in_background(fresh, region)

        return [resolved[mid] for mid in match_ids if mid in resolved]
