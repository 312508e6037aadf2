"""Region enumeration for League of Legends servers."""
from enum import Enum

from ..errors import InvalidRegionError


class Region(Enum):
    """League of Legends platform regions.

    Provides:
    - platform_route: platform host for summoner/league/spectator/mastery (e.g., euw1)
    - regional_route: routing host for account and match APIs (e.g., europe)
    - label: human-readable server name
    """

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for account and match APIs."""
        return _ROUTING[self.value]

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @property
    def match_prefix(self) -> str:
        """Prefix Riot puts on match ids from this platform (``NA1`` → ``NA``)."""
        return "".join(c for c in self.value.upper() if not c.isdigit())

    @classmethod
    def from_string(cls, value: "str | Region") -> "Region":
        """Resolve a platform id, case-insensitively. Raises InvalidRegionError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidRegionError(str(value)) from None

    @classmethod
    def all_regions(cls) -> list['Region']:
        """Get all available regions."""
        return list(cls)


_ROUTING = {
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "kr": "asia",
    "jp1": "asia",
    "oc1": "sea",
    "ph2": "sea",
    "sg2": "sea",
    "th2": "sea",
    "tw2": "sea",
    "vn2": "sea",
}

_LABELS = {
    "na1": "North America",
    "br1": "Brazil",
    "la1": "Latin America North",
    "la2": "Latin America South",
    "euw1": "Europe West",
    "eun1": "Europe Nordic & East",
    "tr1": "Turkey",
    "ru": "Russia",
    "kr": "Korea",
    "jp1": "Japan",
    "oc1": "Oceania",
    "ph2": "Philippines",
    "sg2": "Singapore",
    "th2": "Thailand",
    "tw2": "Taiwan",
    "vn2": "Vietnam",
}
