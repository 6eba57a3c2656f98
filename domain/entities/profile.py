"""Read-only profile view model consumed by the display layer."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .match_aggregate import MatchAggregate


@dataclass(frozen=True)
class RankData:
    """Currently displayed ranked standing."""

    queue_type: str
    tier: str
    division: str
    league_points: int
    wins: int
    losses: int
    hot_streak: bool
    label: str  # e.g. "Gold II" or "Master"

    def to_dict(self) -> dict:
        return {
            'queue_type': self.queue_type,
            'tier': self.tier,
            'division': self.division,
            'league_points': self.league_points,
            'wins': self.wins,
            'losses': self.losses,
            'hot_streak': self.hot_streak,
            'label': self.label,
        }


@dataclass(frozen=True)
class RankHistoryPoint:
    """One point of the rank-history graph."""

    t: datetime
    tier: str
    division: str
    league_points: int
    value: Optional[int]  # continuous scalar rank, None for unrankable tiers

    def to_dict(self) -> dict:
        return {
            't': self.t.isoformat(),
            'tier': self.tier,
            'division': self.division,
            'league_points': self.league_points,
            'value': self.value,
        }


@dataclass(frozen=True)
class MatchView:
    """A recent match enriched with display names."""

    aggregate: MatchAggregate
    champion_name: str
    queue_name: str

    def to_dict(self) -> dict:
        data = self.aggregate.to_dict()
        data['champion_name'] = self.champion_name
        data['queue_name'] = self.queue_name
        return data


@dataclass(frozen=True)
class ChampionStats:
    """Per-champion rollup over the recent-matches window."""

    champion_id: int
    champion_name: str
    games: int
    wins: int
    winrate: float  # percentage
    kda: float

    def to_dict(self) -> dict:
        return {
            'champion_id': self.champion_id,
            'champion_name': self.champion_name,
            'games': self.games,
            'wins': self.wins,
            'winrate': round(self.winrate, 1),
            'kda': round(self.kda, 2),
        }


@dataclass(frozen=True)
class ProfileData:
    """Everything a profile page renders for one account."""

    slug: str
    riot_id: str
    updated_at: datetime
    rank: Optional[RankData]
    rank_history: list[RankHistoryPoint] = field(default_factory=list)
    matches: list[MatchView] = field(default_factory=list)
    champions: list[ChampionStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'slug': self.slug,
            'riot_id': self.riot_id,
            'updated_at': self.updated_at.isoformat(),
            'rank': self.rank.to_dict() if self.rank else None,
            'rank_history': [p.to_dict() for p in self.rank_history],
            'matches': [m.to_dict() for m in self.matches],
            'champions': [c.to_dict() for c in self.champions],
        }
