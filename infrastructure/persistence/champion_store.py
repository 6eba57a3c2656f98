"""SQLite-backed champion catalog."""
from datetime import datetime, timezone
from typing import List

from domain.entities import Champion
from domain.interfaces import IChampionStore
from .database import Database, to_ms


class ChampionStore(IChampionStore):

    def __init__(self, db: Database):
        self._conn = db.conn

    def upsert_all(self, champions: List[Champion]) -> int:
        now = to_ms(datetime.now(timezone.utc))
        self._conn.executemany(
            """INSERT INTO champions(id, key, name, title, image_url, updated_at)
               VALUES(?, ?, ?, ?, ?, ?)
               ON CONFLICT(id) DO UPDATE SET key=excluded.key, name=excluded.name,
               title=excluded.title, image_url=excluded.image_url, updated_at=excluded.updated_at""",
            [(c.id, c.key, c.name, c.title, c.image_url, now) for c in champions],
        )
        self._conn.commit()
        return len(champions)

    def name_map(self) -> dict[int, str]:
        rows = self._conn.execute("SELECT id, name FROM champions").fetchall()
        return {r["id"]: r["name"] for r in rows}

    def all(self) -> List[Champion]:
        rows = self._conn.execute("SELECT * FROM champions ORDER BY name").fetchall()
        return [
            Champion(id=r["id"], key=r["key"], name=r["name"], title=r["title"], image_url=r["image_url"])
            for r in rows
        ]
