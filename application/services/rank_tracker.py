"""Rank snapshot tracker - persists a snapshot only when the standing moved."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional

from core.logging.logger import get_logger
from domain.entities import Account, Snapshot, standing_changed
from domain.exceptions import RiotAPIError
from domain.interfaces import ILeagueRepository, ISnapshotStore
from domain.ranking import format_rank
from application.results import ItemResult

Now = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RankSnapshotTracker:
    """
    Compares live league entries against the last stored snapshot per queue.

    Snapshot volume follows rank movement, not polling frequency: a refresh
    that sees the same tier, division, LP, wins, losses and hot-streak as
    the previous row writes nothing.
    """

    def __init__(
        self,
        league_repo: ILeagueRepository,
        snapshots: ISnapshotStore,
        now: Optional[Now] = None,
    ):
        self.league_repo = league_repo
        self.snapshots = snapshots
        self._now: Now = now or utc_now
        self._log = get_logger(__name__, service="rank")

    async def refresh_rank(self, account: Account) -> List[ItemResult]:
        try:
            entries = await self.league_repo.get_entries(account)
        except RiotAPIError as exc:
            self._log.error(lambda: f"Failed to fetch rank for {account.slug}: {exc}")
            return [ItemResult.failed(f"{account.slug}:league", exc)]

        if not entries:
            self._log.warning(lambda: f"No ranked data found for {account.slug}")
            return []

        results: List[ItemResult] = []
        for entry in entries:
            key = f"{account.slug}:{entry.queue_type}"
            previous = self.snapshots.latest(account.slug, entry.queue_type)
            if not standing_changed(previous, entry):
                self._log.debug(lambda: f"Rank unchanged ({entry.queue_type})")
                results.append(ItemResult.skipped(key, "unchanged"))
                continue

            created_at = self._now()
            if previous is not None and created_at < previous.created_at:
                # Never backdate: a clock step backwards must not reorder the sequence.
                created_at = previous.created_at
            saved = self.snapshots.add(Snapshot.from_entry(account.slug, entry, created_at))
            label = format_rank(saved.tier, saved.division)
            self._log.success(lambda: f"Rank snapshot: {label} {saved.league_points} LP ({saved.queue_type})")
            results.append(ItemResult.ok(key, f"{label} {saved.league_points} LP"))
        return results
