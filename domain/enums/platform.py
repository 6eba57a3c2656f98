"""Platform enumeration for League of Legends servers."""
from enum import Enum


class Platform(Enum):
    """League of Legends platform (shard) a tracked account lives on.

    Provides:
    - platform_route: platform host for league endpoints (e.g., euw1)
    - regional_route: routing host for account and match APIs (e.g., europe)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for account and match APIs."""
        regional_mapping = {
            "euw1": "europe",
            "eun1": "europe",
            "tr1": "europe",
            "ru": "europe",
            "na1": "americas",
            "br1": "americas",
            "la1": "americas",
            "la2": "americas",
            "kr": "asia",
            "jp1": "asia",
            "oc1": "sea",
        }
        return regional_mapping.get(self.value, "americas")

    @classmethod
    def from_string(cls, value: str) -> 'Platform':
        """Create Platform from a routing value such as ``EUW1`` or ``euw1``."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown platform: {value!r}") from None
