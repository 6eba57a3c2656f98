"""Tests for the refresh and profile use cases."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.results import ItemResult
from application.services import IdentityResolver, ProfileViewBuilder
from application.use_cases import GetProfileUseCase, RefreshAccountUseCase, RefreshAllAccountsUseCase
from domain.entities import Account
from domain.enums import Platform
from domain.exceptions import HttpError, NotConfigured, NotFound

from factories import PUUID

ALPHA = Account("alpha", "Alpha", "EUW", Platform.EUW1, "p-alpha")
GHOST = Account("ghost", "Ghost", "000", Platform.EUW1)


def make_refresh(account_store, calls, accounts):
    api = AsyncMock()
    api.get_account_by_riot_id.side_effect = HttpError(404, "Data not found")

    tracker = MagicMock()
    aggregator = MagicMock()

    async def refresh_rank(account):
        calls.append(("rank", account.slug))
        return [ItemResult.ok(f"{account.slug}:RANKED_SOLO_5x5")]

    async def refresh_matches(account, limit=None):
        calls.append(("matches", account.slug))
        return [ItemResult.failed(f"EUW1_1:{account.slug}", HttpError(500, "boom"))]

    tracker.refresh_rank = AsyncMock(side_effect=refresh_rank)
    aggregator.refresh_matches = AsyncMock(side_effect=refresh_matches)
    return RefreshAccountUseCase(IdentityResolver(api, account_store), tracker, aggregator, accounts=accounts)


class TestRefreshAccount:

    @pytest.mark.asyncio
    async def test_unknown_slug_raises(self, account_store):
        use_case = make_refresh(account_store, [], [ALPHA])
        with pytest.raises(NotConfigured):
            await use_case.execute("nobody")

    @pytest.mark.asyncio
    async def test_rank_runs_before_matches(self, account_store):
        calls = []
        result = await make_refresh(account_store, calls, [ALPHA]).execute("alpha")

        assert calls == [("rank", "alpha"), ("matches", "alpha")]
        assert len(result.rank) == 1
        assert len(result.failed) == 1
        assert not result.ok
        assert result.to_dict()["status"] == "success"
        assert account_store.get("alpha").puuid == "p-alpha"

    @pytest.mark.asyncio
    async def test_identity_failure_raises(self, account_store):
        calls = []
        with pytest.raises(NotFound):
            await make_refresh(account_store, calls, [GHOST]).execute("ghost")
        assert calls == []


class TestRefreshAll:

    @pytest.mark.asyncio
    async def test_continues_after_account_error(self, account_store):
        calls = []
        refresh_one = make_refresh(account_store, calls, [GHOST, ALPHA])

        results = await RefreshAllAccountsUseCase(refresh_one).execute()

        assert [r.slug for r in results] == ["ghost", "alpha"]
        assert isinstance(results[0].error, NotFound)
        assert results[0].to_dict()["status"] == "error"
        assert results[1].error is None
        assert ("rank", "alpha") in calls

    @pytest.mark.asyncio
    async def test_unexpected_error_is_recorded_and_loop_continues(self, account_store):
        beta = Account("beta", "Beta", "EUW", Platform.EUW1, "p-beta")
        calls = []
        refresh_one = make_refresh(account_store, calls, [beta, ALPHA])

        async def refresh_matches(account, limit=None):
            calls.append(("matches", account.slug))
            if account.slug == "beta":
                raise RuntimeError("database is locked")
            return []

        refresh_one.aggregator.refresh_matches = AsyncMock(side_effect=refresh_matches)

        results = await RefreshAllAccountsUseCase(refresh_one).execute()

        assert [r.slug for r in results] == ["beta", "alpha"]
        assert isinstance(results[0].error, RuntimeError)
        assert results[0].to_dict()["status"] == "error"
        assert results[1].error is None
        assert results[1].ok
        assert ("matches", "alpha") in calls


class TestGetProfile:

    def make(self, snapshot_store, aggregate_store, champion_store, account_store, accounts):
        builder = ProfileViewBuilder(snapshot_store, aggregate_store, champion_store)
        return GetProfileUseCase(builder, account_store, accounts)

    def test_builds_profile_for_seeded_account(self, snapshot_store, aggregate_store, champion_store,
                                               account_store, account):
        use_case = self.make(snapshot_store, aggregate_store, champion_store, account_store, [account])
        profile = use_case.execute("tester")
        assert profile.slug == "tester"
        assert profile.rank is None

    def test_unconfigured_slug(self, snapshot_store, aggregate_store, champion_store, account_store, account):
        use_case = self.make(snapshot_store, aggregate_store, champion_store, account_store, [])
        with pytest.raises(NotConfigured) as info:
            use_case.execute("tester")
        assert info.value.where == "configuration"

    def test_configured_but_not_seeded(self, snapshot_store, aggregate_store, champion_store, account_store):
        configured = Account("fresh", "Fresh", "EUW", Platform.EUW1, PUUID)
        use_case = self.make(snapshot_store, aggregate_store, champion_store, account_store, [configured])
        with pytest.raises(NotConfigured) as info:
            use_case.execute("fresh")
        assert info.value.where == "store"
