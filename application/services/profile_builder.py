"""Profile view builder - read-only assembly of everything a profile page shows."""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import (
    Account,
    ChampionStats,
    MatchAggregate,
    MatchView,
    ProfileData,
    RankData,
    RankHistoryPoint,
    Snapshot,
    champion_label,
)
from domain.enums import QueueType
from domain.interfaces import IChampionStore, IMatchAggregateStore, ISnapshotStore
from domain.ranking import format_rank, snapshot_scalar
from .rank_tracker import utc_now


def current_snapshot(latest_per_queue: List[Snapshot]) -> Optional[Snapshot]:
    """Pick the displayed standing: Solo/Duo, then Flex, then whatever else is newest."""
    by_queue = {s.queue_type: s for s in reversed(latest_per_queue)}
    for queue in QueueType.ranked_queues():
        if queue.value in by_queue:
            return by_queue[queue.value]
    return latest_per_queue[0] if latest_per_queue else None


def champion_stats(aggregates: List[MatchAggregate], names: Dict[int, str]) -> List[ChampionStats]:
    """Group matches by champion; most played first, ties keep first-seen order."""
    grouped: Dict[int, List[MatchAggregate]] = {}
    for agg in aggregates:
        grouped.setdefault(agg.champion_id, []).append(agg)

    stats = []
    for champion_id, games in grouped.items():
        wins = sum(1 for g in games if g.win)
        kills = sum(g.kills for g in games)
        deaths = sum(g.deaths for g in games)
        assists = sum(g.assists for g in games)
        stats.append(ChampionStats(
            champion_id=champion_id,
            champion_name=champion_label(champion_id, names),
            games=len(games),
            wins=wins,
            winrate=(wins / len(games)) * 100 if games else 0.0,
            kda=(kills + assists) / deaths if deaths else float(kills + assists),
        ))
    stats.sort(key=lambda s: s.games, reverse=True)
    return stats


class ProfileViewBuilder:
    """
    Builds ``ProfileData`` from stored state only.

    No external calls are made and missing data never raises: an account
    without snapshots gets ``rank=None`` and an empty history, one without
    matches gets empty match and champion lists.
    """

    def __init__(
        self,
        snapshots: ISnapshotStore,
        aggregates: IMatchAggregateStore,
        champions: IChampionStore,
        history_limit: Optional[int] = None,
        matches_limit: Optional[int] = None,
        top_champions: Optional[int] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.snapshots = snapshots
        self.aggregates = aggregates
        self.champions = champions
        self.history_limit = history_limit if history_limit is not None else settings.RANK_HISTORY_LIMIT
        self.matches_limit = matches_limit if matches_limit is not None else settings.RECENT_MATCHES_LIMIT
        self.top_champions = top_champions if top_champions is not None else settings.TOP_CHAMPIONS
        self._now = now or utc_now
        self._log = get_logger(__name__, service="profile")

    def build_profile(self, account: Account) -> ProfileData:
        current = current_snapshot(self.snapshots.latest_per_queue(account.slug))

        rank = None
        history: List[RankHistoryPoint] = []
        if current is not None:
            rank = RankData(
                queue_type=current.queue_type,
                tier=current.tier,
                division=current.division,
                league_points=current.league_points,
                wins=current.wins,
                losses=current.losses,
                hot_streak=current.hot_streak,
                label=format_rank(current.tier, current.division),
            )
            recent = self.snapshots.recent(account.slug, current.queue_type, self.history_limit)
            history = [self._history_point(s) for s in reversed(recent)]

        names = self.champions.name_map()
        aggregates = self.aggregates.recent(account.slug, self.matches_limit)
        matches = [
            MatchView(
                aggregate=agg,
                champion_name=champion_label(agg.champion_id, names),
                queue_name=QueueType.display_name_for(agg.queue_id),
            )
            for agg in aggregates
        ]

        self._log.debug(
            lambda: f"Profile for {account.slug}: {len(history)} history points, {len(matches)} matches"
        )
        return ProfileData(
            slug=account.slug,
            riot_id=account.riot_id,
            updated_at=current.created_at if current is not None else self._now(),
            rank=rank,
            rank_history=history,
            matches=matches,
            champions=champion_stats(aggregates, names)[:self.top_champions],
        )

    def _history_point(self, snapshot: Snapshot) -> RankHistoryPoint:
        try:
            value: Optional[int] = snapshot_scalar(snapshot)
        except ValueError:
            value = None
        return RankHistoryPoint(
            t=snapshot.created_at,
            tier=snapshot.tier,
            division=snapshot.division,
            league_points=snapshot.league_points,
            value=value,
        )
