from __future__ import annotations

from config import settings
from config.accounts import ACCOUNTS
from core.logging.logger import get_logger
from infrastructure import RiotAPIClient
from application.results import count_by_status
from application.services import IdentityResolver
from .pipeline import Stores, open_database


class SeedCommand:
    """Upserts every configured account and resolves missing PUUIDs."""

    def __init__(self) -> None:
        self._log = get_logger(__name__, service="seed-cli")

    async def run(self) -> int:
        settings.validate()
        if not ACCOUNTS:
            print("No accounts configured. Set TRACKED_ACCOUNTS in config/.env.")
            return 1

        with open_database() as db:
            stores = Stores(db)
            async with RiotAPIClient(settings.RIOT_API_KEY) as api:
                results = await IdentityResolver(api, stores.accounts).seed_accounts(ACCOUNTS)

        for r in results:
            mark = "✗" if r.is_failure else "✓"
            print(f"  {mark} {r.key}: {r.detail}")
        counts = count_by_status(results)
        self._log.info(lambda: f"seed-done ok={counts['ok']} failed={counts['failed']}")
        print(f"\nSeeded {counts['ok']}/{len(results)} accounts.")
        return 1 if counts['failed'] else 0
