"""Match entity representing a complete match."""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from .participant import Participant


@dataclass
class Match:
    """Represents the parts of a match-v5 record the aggregator needs."""

    # Match identity
    match_id: str
    queue_id: int

    # Timing
    game_creation: datetime  # UTC
    game_duration: int  # Seconds

    participants: list[Participant] = field(default_factory=list)

    @property
    def game_end(self) -> datetime:
        return self.game_creation + timedelta(seconds=self.game_duration)

    def participant_for(self, puuid: str) -> Optional[Participant]:
        """Find the participant record of a given player."""
        return next((p for p in self.participants if p.puuid == puuid), None)

    def side_of(self, participant: Participant) -> list[Participant]:
        """Participants on the same side, partitioned by the win flag."""
        return [p for p in self.participants if p.win == participant.win]
