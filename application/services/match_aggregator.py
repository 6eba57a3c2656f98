"""Match aggregator - turns raw match records into durable per-account rollups."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from config import settings
from core.logging.context import log_context
from core.logging.logger import get_logger
from domain.entities import Account, Match, MatchAggregate, Participant, aggregate_key
from domain.enums import QueueType
from domain.exceptions import RiotAPIError
from domain.interfaces import IMatchAggregateStore, IMatchRepository, ISnapshotStore
from domain.ranking import bracketed_delta
from application.results import ItemResult


def per_minute(value: float, duration_seconds: int) -> float:
    """Rate per game minute; 0 for zero-length games."""
    minutes = duration_seconds / 60.0
    return value / minutes if minutes > 0 else 0.0


def damage_share(match: Match, participant: Participant) -> Optional[float]:
    """Share of the side's champion damage, the side being everyone with the same win flag."""
    team_total = sum(p.total_damage_dealt_to_champions for p in match.side_of(participant))
    if team_total <= 0:
        return None
    return participant.total_damage_dealt_to_champions / team_total


def build_aggregate(
    match: Match,
    participant: Participant,
    account_slug: str,
    lp_delta: Optional[int] = None,
) -> MatchAggregate:
    return MatchAggregate(
        match_id=match.match_id,
        account_slug=account_slug,
        created_at=match.game_creation,
        queue_id=match.queue_id,
        win=participant.win,
        kills=participant.kills,
        deaths=participant.deaths,
        assists=participant.assists,
        cs_per_min=per_minute(participant.creep_score, match.game_duration),
        gold_per_min=per_minute(participant.gold_earned, match.game_duration),
        damage_share=damage_share(match, participant),
        champion_id=participant.champion_id,
        role=participant.team_position.value if participant.team_position else None,
        lp_delta=lp_delta,
    )


class MatchAggregator:
    """
    Processes an account's recent matches, newest first.

    - Known matches are skipped, except that a ranked aggregate with a null
      LP delta gets one backfill attempt per refresh.
    - A failed match fetch is logged and recorded; the batch carries on.
    - LP delta comes from the snapshots bracketing the match window, so the
      rank refresh must run before this step.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        aggregates: IMatchAggregateStore,
        snapshots: ISnapshotStore,
        backfill_minutes: Optional[int] = None,
    ):
        self.match_repo = match_repo
        self.aggregates = aggregates
        self.snapshots = snapshots
        self.backfill_window = timedelta(
            minutes=backfill_minutes if backfill_minutes is not None else settings.BACKFILL_MATCH_MINUTES
        )
        self._log = get_logger(__name__, service="matches")

    async def refresh_matches(self, account: Account, limit: Optional[int] = None) -> List[ItemResult]:
        if limit is None:
            limit = settings.MATCHES_PER_REFRESH
        if limit <= 0:
            return []
        try:
            match_ids = await self.match_repo.get_recent_match_ids(account, limit)
        except RiotAPIError as exc:
            self._log.error(lambda: f"Failed to fetch matches for {account.slug}: {exc}")
            return [ItemResult.failed(f"{account.slug}:match-ids", exc)]

        self._log.info(lambda: f"Found {len(match_ids)} recent matches")
        results: List[ItemResult] = []
        for match_id in match_ids:
            with log_context(match_id=match_id):
                results.append(await self._process(account, match_id))
        return results

    async def _process(self, account: Account, match_id: str) -> ItemResult:
        key = aggregate_key(match_id, account.slug)

        existing = self.aggregates.get(key)
        if existing is not None:
            if existing.lp_delta is None and existing.queue_id in QueueType.ranked_queue_ids():
                return self._backfill(existing)
            return ItemResult.skipped(key, "already processed")

        try:
            match = await self.match_repo.get_match(account, match_id)
        except RiotAPIError as exc:
            self._log.error(lambda: f"Failed to process match {match_id}: {exc}")
            return ItemResult.failed(key, exc)

        participant = match.participant_for(account.puuid or "")
        if participant is None:
            self._log.warning(lambda: f"{account.slug} is not a participant of {match_id}")
            return ItemResult.skipped(key, "participant not found")

        lp = None
        queue = QueueType.from_queue_id(match.queue_id)
        if queue is not None:
            lp = self._lp_delta(account.slug, queue, match.game_creation, match.game_end)

        aggregate = build_aggregate(match, participant, account.slug, lp)
        if not self.aggregates.insert_if_absent(aggregate):
            return ItemResult.skipped(key, "already processed")
        return ItemResult.ok(key, "stored" if lp is None else f"stored ({lp:+d} LP)")

    def _backfill(self, aggregate: MatchAggregate) -> ItemResult:
        queue = QueueType.from_queue_id(aggregate.queue_id)
        if queue is None:
            return ItemResult.skipped(aggregate.key, "unranked")
        # Duration is not stored on the aggregate, so the end of the match is
        # approximated; shorter or longer games may pick the wrong snapshot.
        approx_end = aggregate.created_at + self.backfill_window
        self._log.debug(lambda: f"Backfilling LP with approximate end {approx_end.isoformat()}")
        lp = self._lp_delta(aggregate.account_slug, queue, aggregate.created_at, approx_end)
        if lp is None:
            return ItemResult.skipped(aggregate.key, "awaiting snapshots")
        if not self.aggregates.set_lp_delta(aggregate.key, lp):
            return ItemResult.skipped(aggregate.key, "already backfilled")
        self._log.info(lambda: f"Backfilled LP delta {lp:+d} for {aggregate.match_id}")
        return ItemResult.ok(aggregate.key, f"backfilled ({lp:+d} LP)")

    def _lp_delta(self, slug: str, queue: QueueType, start: datetime, end: datetime) -> Optional[int]:
        candidates = self.snapshots.between(slug, queue.value, start, end)
        try:
            return bracketed_delta(candidates, start, end)
        except ValueError as exc:
            self._log.warning(lambda: f"Cannot rank snapshots for {slug}/{queue.value}: {exc}")
            return None
