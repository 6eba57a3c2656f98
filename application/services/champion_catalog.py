"""Champion catalog refresh from Data Dragon."""
from __future__ import annotations

from core.logging.logger import get_logger, timed
from domain.interfaces import IChampionStore
from infrastructure.api import DataDragonClient


class ChampionCatalogService:
    """Keeps the champion reference table in step with the latest game version."""

    def __init__(self, ddragon: DataDragonClient, champions: IChampionStore):
        self.ddragon = ddragon
        self.champions = champions
        self._log = get_logger(__name__, service="champions")

    @timed("champion catalog refresh")
    async def refresh(self) -> int:
        champions = await self.ddragon.get_champions()
        if not champions:
            self._log.warning("Data Dragon returned no champions; keeping the stored catalog")
            return 0
        written = self.champions.upsert_all(champions)
        self._log.success(lambda: f"Champion catalog refreshed ({written} champions)")
        return written
