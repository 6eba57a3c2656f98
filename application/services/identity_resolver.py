"""Identity resolver - Riot ID (GameName#TAG) to opaque PUUID."""
from __future__ import annotations

from typing import List

from core.logging.context import log_context
from core.logging.logger import get_logger
from domain.entities import Account
from domain.enums import Platform
from domain.exceptions import HttpError, NotFound, RiotAPIError
from domain.interfaces import IAccountStore
from infrastructure.api import RiotAPIClient
from application.results import ItemResult


class IdentityResolver:
    """
    Resolves each tracked account's PUUID exactly once.

    The PUUID is stable for the lifetime of a Riot account, so once it is
    in the store it is reused and no further account-v1 calls are made.
    """

    def __init__(self, api_client: RiotAPIClient, accounts: IAccountStore):
        self.api_client = api_client
        self.accounts = accounts
        self._log = get_logger(__name__, service="identity")

    async def resolve(self, platform: Platform, game_name: str, tag_line: str) -> str:
        """One account-v1 lookup; raises NotFound when the Riot ID does not exist."""
        riot_id = f"{game_name}#{tag_line}"
        try:
            data = await self.api_client.get_account_by_riot_id(platform, game_name, tag_line)
        except HttpError as exc:
            if exc.status == 404:
                raise NotFound(riot_id) from exc
            raise
        puuid = (data or {}).get("puuid")
        if not puuid:
            raise NotFound(riot_id)
        return puuid

    async def ensure_resolved(self, account: Account) -> Account:
        """Return the stored account, resolving and persisting its PUUID if missing."""
        stored = self.accounts.get(account.slug)
        puuid = account.puuid or (stored.puuid if stored else None)
        if not puuid:
            self._log.info(lambda: f"Resolving PUUID for {account.riot_id}")
            puuid = await self.resolve(account.platform, account.game_name, account.tag_line)
        return self.accounts.upsert(account.with_puuid(puuid))

    async def seed_accounts(self, accounts: List[Account]) -> List[ItemResult]:
        """Upsert every configured account; one failure never stops the loop."""
        results: List[ItemResult] = []
        for acc in accounts:
            with log_context(account=acc.slug):
                try:
                    seeded = await self.ensure_resolved(acc)
                except RiotAPIError as exc:
                    self._log.error(lambda: f"Failed to resolve PUUID for {acc.riot_id}: {exc}")
                    results.append(ItemResult.failed(acc.slug, exc))
                    continue
                self._log.success(lambda: f"Account seeded (PUUID: {(seeded.puuid or '')[:8]}...)")
                results.append(ItemResult.ok(acc.slug, seeded.puuid or ""))
        return results
