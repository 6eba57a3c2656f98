"""SQLite-backed append-only snapshot store."""
import sqlite3
from datetime import datetime
from typing import List, Optional

from domain.entities import Snapshot
from domain.interfaces import ISnapshotStore
from .database import Database, from_ms, to_ms

_ORDER_DESC = "ORDER BY created_at DESC, id DESC"


class SnapshotStore(ISnapshotStore):
    """Snapshots per (account, queue type), ordered by (created_at, id)."""

    def __init__(self, db: Database):
        self._conn = db.conn

    @staticmethod
    def _row_to_snapshot(row: sqlite3.Row) -> Snapshot:
        return Snapshot(
            id=row["id"],
            account_slug=row["account_slug"],
            queue_type=row["queue_type"],
            tier=row["tier"],
            division=row["division"],
            league_points=row["league_points"],
            wins=row["wins"],
            losses=row["losses"],
            hot_streak=bool(row["hot_streak"]),
            created_at=from_ms(row["created_at"]),
        )

    def add(self, snapshot: Snapshot) -> Snapshot:
        latest = self.latest(snapshot.account_slug, snapshot.queue_type)
        if latest is not None and to_ms(snapshot.created_at) < to_ms(latest.created_at):
            raise ValueError(
                f"Snapshot for {snapshot.account_slug}/{snapshot.queue_type} at "
                f"{snapshot.created_at.isoformat()} predates the latest at {latest.created_at.isoformat()}"
            )
        cur = self._conn.execute(
            """INSERT INTO snapshots(account_slug, queue_type, tier, division, league_points,
               wins, losses, hot_streak, created_at)
               VALUES(?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (snapshot.account_slug, snapshot.queue_type, snapshot.tier, snapshot.division,
             snapshot.league_points, snapshot.wins, snapshot.losses,
             1 if snapshot.hot_streak else 0, to_ms(snapshot.created_at)),
        )
        self._conn.commit()
        row = self._conn.execute("SELECT * FROM snapshots WHERE id = ?", (cur.lastrowid,)).fetchone()
        return self._row_to_snapshot(row)

    def latest(self, account_slug: str, queue_type: str) -> Optional[Snapshot]:
        row = self._conn.execute(
            f"SELECT * FROM snapshots WHERE account_slug = ? AND queue_type = ? {_ORDER_DESC} LIMIT 1",
            (account_slug, queue_type),
        ).fetchone()
        return self._row_to_snapshot(row) if row else None

    def latest_per_queue(self, account_slug: str) -> List[Snapshot]:
        rows = self._conn.execute(
            f"""SELECT * FROM snapshots s
                WHERE s.account_slug = ?
                AND s.id = (
                    SELECT s2.id FROM snapshots s2
                    WHERE s2.account_slug = s.account_slug AND s2.queue_type = s.queue_type
                    ORDER BY s2.created_at DESC, s2.id DESC LIMIT 1
                )
                {_ORDER_DESC}""",
            (account_slug,),
        ).fetchall()
        return [self._row_to_snapshot(r) for r in rows]

    def recent(self, account_slug: str, queue_type: str, limit: int) -> List[Snapshot]:
        rows = self._conn.execute(
            f"SELECT * FROM snapshots WHERE account_slug = ? AND queue_type = ? {_ORDER_DESC} LIMIT ?",
            (account_slug, queue_type, limit),
        ).fetchall()
        return [self._row_to_snapshot(r) for r in rows]

    def between(
        self,
        account_slug: str,
        queue_type: str,
        start: datetime,
        end: datetime,
    ) -> List[Snapshot]:
        before = self._conn.execute(
            f"""SELECT * FROM snapshots WHERE account_slug = ? AND queue_type = ?
                AND created_at <= ? {_ORDER_DESC} LIMIT 1""",
            (account_slug, queue_type, to_ms(start)),
        ).fetchone()
        after = self._conn.execute(
            """SELECT * FROM snapshots WHERE account_slug = ? AND queue_type = ?
               AND created_at >= ? ORDER BY created_at ASC, id ASC LIMIT 1""",
            (account_slug, queue_type, to_ms(end)),
        ).fetchone()
        found = {r["id"]: r for r in (before, after) if r is not None}
        return [self._row_to_snapshot(r) for r in found.values()]
