"""SQLite connection and schema for the tracker store."""
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union


def to_ms(value: datetime) -> int:
    """UTC epoch milliseconds; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(round(value.timestamp() * 1000))


def from_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


class Database:
    """Owns the SQLite connection; pass ``":memory:"`` for a throwaway store."""

    def __init__(self, db_path: Union[Path, str]):
        self.db_path = db_path
        if str(db_path) != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys=ON")
        if str(db_path) != ":memory:":
            self.conn.execute("PRAGMA journal_mode=WAL")
            self.conn.execute("PRAGMA synchronous=NORMAL")
        self._create_tables()

    def _create_tables(self) -> None:
        cur = self.conn.cursor()
        cur.execute(
            "CREATE TABLE IF NOT EXISTS accounts (slug TEXT PRIMARY KEY, game_name TEXT NOT NULL, tag_line TEXT NOT NULL, platform TEXT NOT NULL, puuid TEXT, updated_at INTEGER)"
        )
        cur.execute(
            "CREATE TABLE IF NOT EXISTS snapshots (id INTEGER PRIMARY KEY AUTOINCREMENT, account_slug TEXT NOT NULL, queue_type TEXT NOT NULL, tier TEXT NOT NULL, division TEXT NOT NULL, league_points INTEGER NOT NULL, wins INTEGER NOT NULL, losses INTEGER NOT NULL, hot_streak INTEGER NOT NULL, created_at INTEGER NOT NULL, FOREIGN KEY(account_slug) REFERENCES accounts(slug))"
        )
        cur.execute(
            "CREATE TABLE IF NOT EXISTS match_aggregates (id TEXT PRIMARY KEY, match_id TEXT NOT NULL, account_slug TEXT NOT NULL, created_at INTEGER NOT NULL, queue_id INTEGER NOT NULL, win INTEGER NOT NULL, kills INTEGER NOT NULL, deaths INTEGER NOT NULL, assists INTEGER NOT NULL, cs_per_min REAL NOT NULL, gold_per_min REAL NOT NULL, damage_share REAL, champion_id INTEGER NOT NULL, role TEXT, lp_delta INTEGER, FOREIGN KEY(account_slug) REFERENCES accounts(slug))"
        )
        cur.execute(
            "CREATE TABLE IF NOT EXISTS champions (id INTEGER PRIMARY KEY, key TEXT, name TEXT NOT NULL, title TEXT, image_url TEXT, updated_at INTEGER)"
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_snapshots_account_queue ON snapshots(account_slug, queue_type, created_at)")
        cur.execute("CREATE INDEX IF NOT EXISTS idx_match_aggregates_account ON match_aggregates(account_slug, created_at)")
        self.conn.commit()

    def table_counts(self) -> dict[str, int]:
        names = [r[0] for r in self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        ).fetchall()]
        return {n: self.conn.execute(f'SELECT COUNT(*) FROM "{n}"').fetchone()[0] for n in names}

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> 'Database':
        return self

    def __exit__(self, *_) -> Optional[bool]:
        self.close()
        return None
