"""Ranked standing entities: live league entries and stored snapshots."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


Standing = Tuple[str, str, int, int, int, bool]


@dataclass(frozen=True)
class LeagueEntry:
    """Current standing in one queue as reported by league-v4."""

    queue_type: str
    tier: str
    division: str
    league_points: int
    wins: int
    losses: int
    hot_streak: bool = False

    @classmethod
    def from_api(cls, data: dict) -> 'LeagueEntry':
        return cls(
            queue_type=data['queueType'],
            tier=data.get('tier', ''),
            division=data.get('rank', ''),
            league_points=data.get('leaguePoints', 0),
            wins=data.get('wins', 0),
            losses=data.get('losses', 0),
            hot_streak=bool(data.get('hotStreak', False)),
        )

    @property
    def standing(self) -> Standing:
        return (self.tier, self.division, self.league_points,
                self.wins, self.losses, self.hot_streak)


@dataclass(frozen=True)
class Snapshot:
    """Immutable point-in-time ranked standing of one account in one queue."""

    account_slug: str
    queue_type: str
    tier: str
    division: str
    league_points: int
    wins: int
    losses: int
    hot_streak: bool
    created_at: datetime
    id: Optional[int] = None

    @classmethod
    def from_entry(cls, account_slug: str, entry: LeagueEntry, created_at: datetime) -> 'Snapshot':
        return cls(
            account_slug=account_slug,
            queue_type=entry.queue_type,
            tier=entry.tier,
            division=entry.division,
            league_points=entry.league_points,
            wins=entry.wins,
            losses=entry.losses,
            hot_streak=entry.hot_streak,
            created_at=created_at,
        )

    @property
    def standing(self) -> Standing:
        return (self.tier, self.division, self.league_points,
                self.wins, self.losses, self.hot_streak)

    @property
    def winrate(self) -> float:
        total = self.wins + self.losses
        if total == 0:
            return 0.0
        return (self.wins / total) * 100


def standing_changed(previous: Optional[Snapshot], entry: LeagueEntry) -> bool:
    """True when ``entry`` must be persisted as a new snapshot.

    Only tier, division, points, wins, losses and hot-streak are compared;
    timestamps and ids never count as a change.
    """
    if previous is None:
        return True
    return previous.standing != entry.standing
