"""Rank arithmetic: a single monotonic scale across tiers and divisions.

Each tier owns a 400-point band (IRON 0 ... CHALLENGER 3600). Tiers with
divisions split their band into 100-point steps (IV 0, III 100, II 200,
I 300); Master and above have no divisions. League points are added on top,
so any two standings can be subtracted to get a signed LP delta even when
the change crossed a division or tier boundary.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Tuple, Union

from .entities.snapshot import Snapshot
from .enums import Tier, Division

TIER_SPAN = 400
DIVISION_SPAN = 100

TierLike = Union[Tier, str]
DivisionLike = Union[Division, str, None]


def _tier(value: TierLike) -> Tier:
    return value if isinstance(value, Tier) else Tier.from_string(value)


def scalar_rank(tier: TierLike, division: DivisionLike, points: int) -> int:
    """Map (tier, division, points) onto one integer scale.

    >>> scalar_rank("SILVER", "II", 40)
    1040
    >>> scalar_rank("MASTER", "I", 50)
    2850
    """
    t = _tier(tier)
    base = t.ordinal * TIER_SPAN
    offset = 0
    if t.has_divisions:
        d = division if isinstance(division, Division) else Division.from_string(division or "")
        offset = d.ordinal * DIVISION_SPAN
    return base + offset + int(points)


def snapshot_scalar(snapshot: Snapshot) -> int:
    return scalar_rank(snapshot.tier, snapshot.division, snapshot.league_points)


def lp_delta(before: Snapshot, after: Snapshot) -> int:
    """Signed LP change between two standings; positive means ground gained."""
    return snapshot_scalar(after) - snapshot_scalar(before)


def bracket_snapshots(
    snapshots: Iterable[Snapshot],
    start: datetime,
    end: datetime,
) -> Tuple[Optional[Snapshot], Optional[Snapshot]]:
    """Find the standings that enclose a match.

    Returns the latest snapshot taken at or before ``start`` and the
    earliest taken at or after ``end``. Input order is not trusted; the
    sequence is sorted by (created_at, id) first.
    """
    ordered = sorted(snapshots, key=lambda s: (s.created_at, s.id or 0))
    before = None
    after = None
    for snap in ordered:
        if snap.created_at <= start:
            before = snap
        if snap.created_at >= end and after is None:
            after = snap
    return before, after


def bracketed_delta(snapshots: Iterable[Snapshot], start: datetime, end: datetime) -> Optional[int]:
    """LP delta across a match window, or None while a bracket side is missing."""
    before, after = bracket_snapshots(snapshots, start, end)
    if before is None or after is None:
        return None
    return lp_delta(before, after)


def format_rank(tier: str, division: str) -> str:
    """Display label: "Gold II", or just "Master" for division-less tiers."""
    try:
        t = Tier.from_string(tier)
    except ValueError:
        return tier.capitalize()
    if not t.has_divisions or not division:
        return t.display_name
    return f"{t.display_name} {division}"
