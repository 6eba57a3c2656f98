from __future__ import annotations

from infrastructure import DataDragonClient
from application.services import ChampionCatalogService
from .pipeline import Stores, open_database


class ChampionsCommand:
    """Reloads the champion catalog from Data Dragon."""

    async def run(self) -> int:
        with open_database() as db:
            written = await ChampionCatalogService(DataDragonClient(), Stores(db).champions).refresh()
        print(f"Stored {written} champions.")
        return 0 if written else 1
