"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """
    Everything is read once, at import time.

    Riot development keys allow 20 req/s and 100 req/120s. The per-second
    default sits slightly below that; raise RATE_LIMIT_PER_SECOND once a
    production key is in use.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # "mock" → deterministic fixtures, anything else → live Riot API
    DATA_SOURCE: str = os.getenv('DATA_SOURCE', 'mock').strip().lower()

    # ── Rate limiting ──────────────────────────────────────────────────────
    RATE_LIMIT_PER_SECOND: int = _int_env('RATE_LIMIT_PER_SECOND', 18)

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:              int = _int_env('REQUEST_TIMEOUT', 30)
    MAX_RETRIES:                  int = _int_env('MAX_RETRIES', 3)
    RETRY_AFTER_FALLBACK_SECONDS: int = _int_env('RETRY_AFTER_FALLBACK_SECONDS', 2)

    # ── Match fetching ─────────────────────────────────────────────────────
    MATCH_BATCH_SIZE:    int = _int_env('MATCH_BATCH_SIZE', 5)
    MATCH_HISTORY_COUNT: int = _int_env('MATCH_HISTORY_COUNT', 20)

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    DB_DIR:   Path = DATA_DIR / 'db'
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))

    # ── Match cache ────────────────────────────────────────────────────────
    MATCH_CACHE_ENABLED: bool = _bool_env('MATCH_CACHE_ENABLED', True)
    MATCH_CACHE_PATH:    Path = Path(os.getenv('MATCH_CACHE_PATH', str(DB_DIR / 'match_cache.sqlite')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def uses_live_api(self) -> bool:
        return self.DATA_SOURCE != 'mock'

    def validate(self) -> None:
        if self.uses_live_api and not self.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env when DATA_SOURCE is not 'mock'")
        if self.RATE_LIMIT_PER_SECOND <= 0:
            raise ValueError("RATE_LIMIT_PER_SECOND must be positive")
        if self.MATCH_BATCH_SIZE <= 0:
            raise ValueError("MATCH_BATCH_SIZE must be positive")


settings = Settings()
