from __future__ import annotations

import json
from typing import List, Optional

from config import settings
from config.accounts import ACCOUNTS, by_slug
from core.logging.logger import get_logger
from domain.exceptions import NotConfigured
from infrastructure import RiotAPIClient
from application.results import AccountRefreshResult
from .pipeline import Stores, build_refresh, open_database


class RefreshCommand:
    """Refreshes one account, or all configured accounts, and prints a per-account report."""

    def __init__(self, json_out: bool = False) -> None:
        self.json_out = json_out
        self._log = get_logger(__name__, service="refresh-cli")

    async def run(self, slug: Optional[str] = None) -> int:
        settings.validate()
        accounts = ACCOUNTS
        if slug is not None:
            account = by_slug(slug)
            if account is None:
                raise NotConfigured(slug)
            accounts = [account]

        self._log.info(lambda: f"refresh-start accounts={len(accounts)}")
        with open_database() as db:
            async with RiotAPIClient(settings.RIOT_API_KEY) as api:
                results = await build_refresh(api, Stores(db), accounts).execute()

        self._report(results)
        return 1 if any(r.error is not None for r in results) else 0

    def _report(self, results: List[AccountRefreshResult]) -> None:
        if self.json_out:
            print(json.dumps({'results': [r.to_dict() for r in results]}, indent=2))
            return
        for r in results:
            mark = "✓" if r.ok else "✗"
            print(f"  {mark} {r.summary()}")
            for item in r.failed:
                print(f"      - {item.key}: {item.detail}")
