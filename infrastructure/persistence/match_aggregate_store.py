"""SQLite-backed match aggregate store."""
import sqlite3
from typing import List, Optional

from domain.entities import MatchAggregate
from domain.interfaces import IMatchAggregateStore
from .database import Database, from_ms, to_ms


class MatchAggregateStore(IMatchAggregateStore):
    """One row per ``match_id:account_slug`` key.

    Rows are written with INSERT OR IGNORE so a repeated or concurrent refresh
    can never duplicate a match; the only update path fills a NULL lp_delta.
    """

    def __init__(self, db: Database):
        self._conn = db.conn

    @staticmethod
    def _row_to_aggregate(row: sqlite3.Row) -> MatchAggregate:
        return MatchAggregate(
            match_id=row["match_id"],
            account_slug=row["account_slug"],
            created_at=from_ms(row["created_at"]),
            queue_id=row["queue_id"],
            win=bool(row["win"]),
            kills=row["kills"],
            deaths=row["deaths"],
            assists=row["assists"],
            cs_per_min=row["cs_per_min"],
            gold_per_min=row["gold_per_min"],
            damage_share=row["damage_share"],
            champion_id=row["champion_id"],
            role=row["role"],
            lp_delta=row["lp_delta"],
        )

    def get(self, key: str) -> Optional[MatchAggregate]:
        row = self._conn.execute("SELECT * FROM match_aggregates WHERE id = ?", (key,)).fetchone()
        return self._row_to_aggregate(row) if row else None

    def exists(self, key: str) -> bool:
        row = self._conn.execute("SELECT 1 FROM match_aggregates WHERE id = ?", (key,)).fetchone()
        return row is not None

    def insert_if_absent(self, aggregate: MatchAggregate) -> bool:
        cur = self._conn.execute(
            """INSERT OR IGNORE INTO match_aggregates(id, match_id, account_slug, created_at, queue_id,
               win, kills, deaths, assists, cs_per_min, gold_per_min, damage_share,
               champion_id, role, lp_delta)
               VALUES(?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (aggregate.key, aggregate.match_id, aggregate.account_slug, to_ms(aggregate.created_at),
             aggregate.queue_id, 1 if aggregate.win else 0, aggregate.kills, aggregate.deaths,
             aggregate.assists, aggregate.cs_per_min, aggregate.gold_per_min, aggregate.damage_share,
             aggregate.champion_id, aggregate.role, aggregate.lp_delta),
        )
        self._conn.commit()
        return cur.rowcount == 1

    def set_lp_delta(self, key: str, lp_delta: int) -> bool:
        cur = self._conn.execute(
            "UPDATE match_aggregates SET lp_delta = ? WHERE id = ? AND lp_delta IS NULL",
            (lp_delta, key),
        )
        self._conn.commit()
        return cur.rowcount == 1

    def recent(self, account_slug: str, limit: int) -> List[MatchAggregate]:
        rows = self._conn.execute(
            """SELECT * FROM match_aggregates WHERE account_slug = ?
               ORDER BY created_at DESC, match_id DESC LIMIT ?""",
            (account_slug, limit),
        ).fetchall()
        return [self._row_to_aggregate(r) for r in rows]
