"""SQLite-backed match cache."""
import asyncio
import json
import logging
import sqlite3
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from domain.entities import CachedMatch, MatchRecord, match_id_of
from domain.interfaces import IMatchCache

logger = logging.getLogger(__name__)


class MatchCacheRepository(IMatchCache):
    """
    Write-through cache of match-v5 payloads.

    Matches are immutable once finished, so an entry is written once
    (``INSERT OR IGNORE``) and never updated or deleted. Every storage
    failure degrades to a miss on read and a dropped write; callers never
    see an exception from here.

    Blocking sqlite calls run in a worker thread with a connection per call.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.available = False
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with closing(self._connect()) as conn:
                conn.execute("PRAGMA journal_mode=WAL")
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS match_cache ("
                    "match_id TEXT PRIMARY KEY, region TEXT NOT NULL, "
                    "data TEXT NOT NULL, cached_at TEXT NOT NULL)"
                )
                conn.commit()
            self.available = True
        except (OSError, sqlite3.Error) as exc:
            logger.warning(f"Match cache unavailable at {self.db_path}: {exc}")

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path), timeout=5.0)

    @staticmethod
    def _row_to_entry(row: tuple) -> CachedMatch:
        match_id, region, data, cached_at = row
        return CachedMatch(
            match_id=match_id,
            region=region,
            payload=json.loads(data),
            cached_at=datetime.fromisoformat(cached_at),
        )

    # ── reads ──────────────────────────────────────────────────────────

    def _get_sync(self, match_id: str) -> Optional[CachedMatch]:
        with closing(self._connect()) as conn:
            row = conn.execute(
                "SELECT match_id, region, data, cached_at FROM match_cache WHERE match_id = ?",
                (match_id,),
            ).fetchone()
        return self._row_to_entry(row) if row else None

    def _get_many_sync(self, match_ids: List[str]) -> Dict[str, CachedMatch]:
        result: Dict[str, CachedMatch] = {}
        with closing(self._connect()) as conn:
            # stay well under SQLITE_MAX_VARIABLE_NUMBER
            for i in range(0, len(match_ids), 500):
                chunk = match_ids[i:i + 500]
                ph = ",".join(["?"] * len(chunk))
                rows = conn.execute(
                    f"SELECT match_id, region, data, cached_at FROM match_cache WHERE match_id IN ({ph})",
                    chunk,
                ).fetchall()
                for row in rows:
                    try:
                        result[row[0]] = self._row_to_entry(row)
                    except (ValueError, TypeError):
                        logger.warning(f"Skipping corrupt cache entry {row[0]}")
        return result

    async def get(self, match_id: str) -> Optional[CachedMatch]:
        if not self.available:
            return None
        try:
            return await asyncio.to_thread(self._get_sync, match_id)
        except (sqlite3.Error, ValueError, TypeError) as exc:
            logger.warning(f"Match cache read failed for {match_id}: {exc}")
            return None

    async def get_many(self, match_ids: Iterable[str]) -> Dict[str, CachedMatch]:
        ids = list(dict.fromkeys(match_ids))
        if not ids or not self.available:
            return {}
        try:
            return await asyncio.to_thread(self._get_many_sync, ids)
        except sqlite3.Error as exc:
            logger.warning(f"Match cache bulk read failed: {exc}")
            return {}

    # ── writes ─────────────────────────────────────────────────────────

    def _put_sync(self, match_id: str, region: str, data: str) -> None:
        with closing(self._connect()) as conn:
            conn.execute(
                "INSERT OR IGNORE INTO match_cache (match_id, region, data, cached_at) VALUES (?, ?, ?, ?)",
                (match_id, region, data, datetime.now(timezone.utc).isoformat()),
            )
            conn.commit()

    async def put(self, match: MatchRecord, region: str) -> None:
        if not self.available:
            return
        try:
            match_id = match_id_of(match)
            data = json.dumps(match, separators=(",", ":"))
            await asyncio.to_thread(self._put_sync, match_id, region, data)
        except (KeyError, TypeError, ValueError, sqlite3.Error) as exc:
            logger.debug(f"Match cache write skipped: {exc}")

    async def put_many(self, matches: Iterable[MatchRecord], region: str) -> None:
        await asyncio.gather(*(self.put(m, region) for m in matches), return_exceptions=True)

    def count(self) -> int:
        if not self.available:
            return 0
        try:
            with closing(self._connect()) as conn:
                return conn.execute("SELECT COUNT(*) FROM match_cache").fetchone()[0]
        except sqlite3.Error:
            return 0
