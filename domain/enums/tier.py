"""Rank tier and division enumerations."""
from enum import Enum


class Tier(Enum):
    """League of Legends rank tiers, lowest first."""

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
    def ordinal(self) -> int:
        """Position in competitive ordering (IRON = 0)."""
        return list(Tier).index(self)

    @property
    def has_divisions(self) -> bool:
        """Master, Grandmaster and Challenger are single-division tiers."""
        return self not in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_string(cls, tier_str: str) -> 'Tier':
        """Create Tier from string."""
        try:
            return cls[tier_str.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown tier: {tier_str!r}") from None


class Division(Enum):
    """Divisions within a tier, lowest first."""

    IV = "IV"
    III = "III"
    II = "II"
    I = "I"  # noqa: E741

    @property
    def ordinal(self) -> int:
        """Position within the tier (IV = 0, I = 3)."""
        return list(Division).index(self)

    @classmethod
    def from_string(cls, division_str: str) -> 'Division':
        try:
            return cls[division_str.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown division: {division_str!r}") from None
