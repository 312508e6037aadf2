"""Match records and their cached form.

Match-v5 and spectator-v5 payloads are kept as the raw JSON dicts the API
returns; nothing in this package needs their inner structure beyond the id.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

MatchRecord = Dict[str, Any]
LiveGameRecord = Dict[str, Any]


def match_id_of(match: MatchRecord) -> str:
    """Return ``metadata.matchId``. Raises KeyError when the record has none."""
    return match['metadata']['matchId']


@dataclass(frozen=True)
class CachedMatch:
    """A match payload as stored in the match cache. Immutable once written."""

    match_id: str
    region: str
    payload: MatchRecord
    cached_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
