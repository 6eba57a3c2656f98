"""Match aggregate entity: one tracked account's summary of one match."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

def aggregate_key(match_id: str, account_slug: str) -> str:
    """Storage key guaranteeing at most one row per (match, account)."""
    return f"{match_id}:{account_slug}"

@dataclass(frozen=True)
class MatchAggregate:
    """Persisted per-match performance of a tracked account.

    Immutable once written, except that a null ``lp_delta`` may be filled
    in exactly once when bracketing snapshots become available.
    """

    match_id: str
    account_slug: str
    created_at: datetime
    queue_id: int
    win: bool
    kills: int
    deaths: int
    assists: int
    cs_per_min: float
    gold_per_min: float
    damage_share: Optional[float]
    champion_id: int
    role: Optional[str] = None
    lp_delta: Optional[int] = None

    @property
    def key(self) -> str:
        return aggregate_key(self.match_id, self.account_slug)

    @property
    def kda(self) -> float:
        if self.deaths == 0:
            return float(self.kills + self.assists)
        return (self.kills + self.assists) / self.deaths

    def to_dict(self) -> dict:
        return {
            'id': self.key,
            'match_id': self.match_id,
            'account_slug': self.account_slug,
            'created_at': self.created_at.isoformat(),
            'queue_id': self.queue_id,
            'win': self.win,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'cs_per_min': round(self.cs_per_min, 2),
            'gold_per_min': round(self.gold_per_min, 2),
            'damage_share': round(self.damage_share, 4) if self.damage_share is not None else None,
            'champion_id': self.champion_id,
            'role': self.role,
            'lp_delta': self.lp_delta,
        }
