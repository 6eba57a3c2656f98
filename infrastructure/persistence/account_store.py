"""SQLite-backed account store."""
import sqlite3
from datetime import datetime, timezone
from typing import List, Optional

from domain.entities import Account
from domain.enums import Platform
from domain.interfaces import IAccountStore
from .database import Database, to_ms


class AccountStore(IAccountStore):
    """Accounts keyed by slug; an upsert never clears a resolved PUUID."""

    def __init__(self, db: Database):
        self._conn = db.conn

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            slug=row["slug"],
            game_name=row["game_name"],
            tag_line=row["tag_line"],
            platform=Platform(row["platform"]),
            puuid=row["puuid"],
        )

    def upsert(self, account: Account) -> Account:
        now = to_ms(datetime.now(timezone.utc))
        self._conn.execute(
            """INSERT INTO accounts(slug, game_name, tag_line, platform, puuid, updated_at)
               VALUES(?, ?, ?, ?, ?, ?)
               ON CONFLICT(slug) DO UPDATE SET
               game_name=excluded.game_name, tag_line=excluded.tag_line,
               platform=excluded.platform,
               puuid=COALESCE(excluded.puuid, accounts.puuid),
               updated_at=excluded.updated_at""",
            (account.slug, account.game_name, account.tag_line,
             account.platform.value, account.puuid, now),
        )
        self._conn.commit()
        return self.get(account.slug) or account

    def get(self, slug: str) -> Optional[Account]:
        row = self._conn.execute("SELECT * FROM accounts WHERE slug = ?", (slug,)).fetchone()
        return self._row_to_account(row) if row else None

    def list_all(self) -> List[Account]:
        rows = self._conn.execute("SELECT * FROM accounts ORDER BY slug").fetchall()
        return [self._row_to_account(r) for r in rows]
