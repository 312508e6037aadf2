"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Rank(Enum):
    """League of Legends rank tiers, lowest to highest."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Apex tiers have a single division."""
        return self in (Rank.MASTER, Rank.GRANDMASTER, Rank.CHALLENGER)

    @classmethod
    def all_ranks(cls) -> list['Rank']:
        """Get all rank tiers."""
        return list(cls)

    @classmethod
    def from_string(cls, rank_str: str) -> Optional['Rank']:
        """Create Rank from string, None for unranked or unknown tiers."""
        try:
            return cls[rank_str.upper()]
        except (KeyError, AttributeError):
            return None
