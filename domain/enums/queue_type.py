"""Queue type enumeration for ranked entries."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """Ranked queues as named by the league endpoints.

    Provides:
    - queue_id: numeric queue id used by match-v5
    - queue_name: human-readable name
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"
    RANKED_TFT_DOUBLE_UP = "RANKED_TFT_DOUBLE_UP"

    @property
    def queue_id(self) -> int:
        ids = {
            "RANKED_SOLO_5x5": 420,
            "RANKED_FLEX_SR": 440,
            "RANKED_TFT_DOUBLE_UP": 1160,
        }
        return ids[self.value]

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        names = {
            "RANKED_SOLO_5x5": "Ranked Solo/Duo",
            "RANKED_FLEX_SR": "Ranked Flex",
            "RANKED_TFT_DOUBLE_UP": "Teamfight Tactics (Double Up)",
        }
        return names[self.value]

    @classmethod
    def from_string(cls, value: str) -> Optional['QueueType']:
        try:
            return cls(value)
        except ValueError:
            return None
