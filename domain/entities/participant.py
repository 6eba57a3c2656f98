"""Participant entity representing a player in a match."""
from dataclasses import dataclass
from typing import Optional
from ..enums import Role


@dataclass
class Participant:
    """Represents a player participant in a match."""

    # Identity
    puuid: str
    team_id: int
    champion_id: int
    champion_name: str

    # Position/Role (None in modes without lanes)
    team_position: Optional[Role] = None

    # Match outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    # Farm & gold
    total_minions_killed: int = 0
    neutral_minions_killed: int = 0
    gold_earned: int = 0

    # Damage
    total_damage_dealt_to_champions: int = 0

    @property
    def creep_score(self) -> int:
        """Lane minions plus jungle monsters."""
        return self.total_minions_killed + self.neutral_minions_killed
