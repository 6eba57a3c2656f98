"""Tests for Riot ID to PUUID resolution and account seeding."""
from unittest.mock import AsyncMock

import pytest

from application.services import IdentityResolver
from domain.entities import Account
from domain.enums import Platform
from domain.exceptions import HttpError, NotFound, RateLimited


@pytest.fixture
def api():
    client = AsyncMock()
    client.get_account_by_riot_id.return_value = {"puuid": "p-123", "gameName": "Alpha", "tagLine": "EUW"}
    return client


class TestResolve:

    @pytest.mark.asyncio
    async def test_returns_puuid(self, api, account_store):
        puuid = await IdentityResolver(api, account_store).resolve(Platform.EUW1, "Alpha", "EUW")
        assert puuid == "p-123"
        api.get_account_by_riot_id.assert_awaited_once_with(Platform.EUW1, "Alpha", "EUW")

    @pytest.mark.asyncio
    async def test_404_is_not_found(self, api, account_store):
        api.get_account_by_riot_id.side_effect = HttpError(404, "Data not found")
        with pytest.raises(NotFound) as info:
            await IdentityResolver(api, account_store).resolve(Platform.EUW1, "Ghost", "000")
        assert info.value.riot_id == "Ghost#000"

    @pytest.mark.asyncio
    async def test_missing_puuid_is_not_found(self, api, account_store):
        api.get_account_by_riot_id.return_value = {}
        with pytest.raises(NotFound):
            await IdentityResolver(api, account_store).resolve(Platform.EUW1, "Alpha", "EUW")

    @pytest.mark.asyncio
    async def test_rate_limit_propagates(self, api, account_store):
        api.get_account_by_riot_id.side_effect = RateLimited(retry_after=3)
        with pytest.raises(RateLimited):
            await IdentityResolver(api, account_store).resolve(Platform.EUW1, "Alpha", "EUW")


class TestEnsureResolved:

    @pytest.mark.asyncio
    async def test_resolves_and_persists_once(self, api, account_store):
        resolver = IdentityResolver(api, account_store)
        acc = Account("alpha", "Alpha", "EUW", Platform.EUW1)

        first = await resolver.ensure_resolved(acc)
        second = await resolver.ensure_resolved(acc)

        assert first.puuid == second.puuid == "p-123"
        assert account_store.get("alpha").puuid == "p-123"
        assert api.get_account_by_riot_id.await_count == 1

    @pytest.mark.asyncio
    async def test_pinned_puuid_skips_lookup(self, api, account_store):
        acc = Account("alpha", "Alpha", "EUW", Platform.EUW1, "pinned")
        resolved = await IdentityResolver(api, account_store).ensure_resolved(acc)
        assert resolved.puuid == "pinned"
        api.get_account_by_riot_id.assert_not_awaited()


class TestSeedAccounts:

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_the_loop(self, api, account_store):
        async def lookup(platform, game_name, tag_line):
            if game_name == "Ghost":
                raise HttpError(404, "Data not found")
            return {"puuid": f"p-{game_name.lower()}"}

        api.get_account_by_riot_id.side_effect = lookup
        accounts = [
            Account("ghost", "Ghost", "000", Platform.EUW1),
            Account("alpha", "Alpha", "EUW", Platform.EUW1),
        ]

        results = await IdentityResolver(api, account_store).seed_accounts(accounts)

        assert [r.is_failure for r in results] == [True, False]
        assert isinstance(results[0].error, NotFound)
        assert account_store.get("alpha").puuid == "p-alpha"
        assert account_store.get("ghost") is None
