"""Tests for MatchAggregator: derivation, dedup, LP delta and backfill."""
from datetime import timedelta
from unittest.mock import AsyncMock

import httpx
import pytest

from application.results import ItemStatus
from application.services import MatchAggregator
from application.services.match_aggregator import build_aggregate, damage_share, per_minute
from domain.enums import Role
from domain.exceptions import HttpError, RiotAPIError
from infrastructure.api import RiotAPIClient, TokenBucket
from infrastructure.repositories import MatchRepository

from factories import PUUID, T0, match, match_payload, snapshot


def make_repo(*matches):
    by_id = {m.match_id: m for m in matches}
    repo = AsyncMock()
    repo.get_recent_match_ids.return_value = [m.match_id for m in matches]

    async def get_match(account, match_id):
        return by_id[match_id]

    repo.get_match.side_effect = get_match
    return repo


def make_aggregator(repo, aggregate_store, snapshot_store):
    return MatchAggregator(repo, aggregate_store, snapshot_store, backfill_minutes=30)


class TestDerivedStats:

    def test_per_minute(self):
        assert per_minute(200, 1800) == pytest.approx(6.67, abs=0.01)
        assert per_minute(12000, 1800) == pytest.approx(400.0)

    def test_per_minute_zero_duration(self):
        assert per_minute(200, 0) == 0.0

    def test_damage_share_uses_same_win_flag(self):
        m = match("EUW1_1", damage=10000, ally_damage=7500)
        me = m.participant_for(PUUID)
        assert damage_share(m, me) == pytest.approx(0.25)

    def test_damage_share_null_when_side_dealt_nothing(self):
        m = match("EUW1_1", damage=0, ally_damage=0)
        assert damage_share(m, m.participant_for(PUUID)) is None

    def test_build_aggregate(self):
        m = match("EUW1_1", kills=3, deaths=0, assists=9, role=None)
        agg = build_aggregate(m, m.participant_for(PUUID), "tester")

        assert agg.key == "EUW1_1:tester"
        assert agg.cs_per_min == pytest.approx(200 / 30)
        assert agg.gold_per_min == pytest.approx(400.0)
        assert agg.role is None
        assert agg.kda == 12.0
        assert agg.lp_delta is None

    def test_build_aggregate_keeps_role_value(self):
        m = match("EUW1_1", role=Role.UTILITY)
        assert build_aggregate(m, m.participant_for(PUUID), "tester").role == "UTILITY"


class TestRefreshMatches:

    @pytest.mark.asyncio
    async def test_stores_new_matches(self, account, aggregate_store, snapshot_store):
        repo = make_repo(match("EUW1_2"), match("EUW1_1", creation=T0 - timedelta(hours=1)))
        aggregator = make_aggregator(repo, aggregate_store, snapshot_store)

        results = await aggregator.refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.OK, ItemStatus.OK]
        repo.get_recent_match_ids.assert_awaited_once_with(account, 10)
        stored = aggregate_store.get("EUW1_2:tester")
        assert stored.cs_per_min == pytest.approx(6.67, abs=0.01)
        assert stored.damage_share == pytest.approx(0.25)
        assert stored.lp_delta is None

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, account, aggregate_store, snapshot_store):
        repo = make_repo(match("EUW1_1", queue_id=450))
        aggregator = make_aggregator(repo, aggregate_store, snapshot_store)

        await aggregator.refresh_matches(account, 10)
        results = await aggregator.refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.SKIPPED]
        assert repo.get_match.await_count == 1
        assert len(aggregate_store.recent("tester", 10)) == 1

    @pytest.mark.asyncio
    async def test_lp_delta_from_bracketing_snapshots(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), "GOLD", "II", 90))
        snapshot_store.add(snapshot(T0 + timedelta(minutes=35), "GOLD", "I", 10))
        repo = make_repo(match("EUW1_1", duration=1800))

        results = await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert results[0].status is ItemStatus.OK
        assert aggregate_store.get("EUW1_1:tester").lp_delta == 20

    @pytest.mark.asyncio
    async def test_snapshot_inside_match_window_is_not_a_bracket(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), lp=40))
        snapshot_store.add(snapshot(T0 + timedelta(minutes=20), lp=60))
        repo = make_repo(match("EUW1_1", duration=1800))

        await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert aggregate_store.get("EUW1_1:tester").lp_delta is None

    @pytest.mark.asyncio
    async def test_flex_match_uses_flex_snapshots(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), lp=40))
        snapshot_store.add(snapshot(T0 + timedelta(minutes=40), lp=80))
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), queue_type="RANKED_FLEX_SR", lp=10))
        snapshot_store.add(snapshot(T0 + timedelta(minutes=40), queue_type="RANKED_FLEX_SR", lp=0))
        repo = make_repo(match("EUW1_1", queue_id=440, win=False))

        await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert aggregate_store.get("EUW1_1:tester").lp_delta == -10

    @pytest.mark.asyncio
    async def test_backfill_fills_null_delta_once(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), lp=40))
        repo = make_repo(match("EUW1_1", duration=1500))
        aggregator = make_aggregator(repo, aggregate_store, snapshot_store)

        await aggregator.refresh_matches(account, 10)
        assert aggregate_store.get("EUW1_1:tester").lp_delta is None

        # the next rank refresh lands after the game
        snapshot_store.add(snapshot(T0 + timedelta(minutes=40), lp=58))
        results = await aggregator.refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.OK]
        assert aggregate_store.get("EUW1_1:tester").lp_delta == 18
        assert repo.get_match.await_count == 1

        snapshot_store.add(snapshot(T0 + timedelta(minutes=50), lp=99))
        results = await aggregator.refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.SKIPPED]
        assert aggregate_store.get("EUW1_1:tester").lp_delta == 18

    @pytest.mark.asyncio
    async def test_backfill_uses_approximate_end(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), lp=40))
        repo = make_repo(match("EUW1_1", duration=1500))
        aggregator = make_aggregator(repo, aggregate_store, snapshot_store)
        await aggregator.refresh_matches(account, 10)

        # before created_at + 30 minutes, so not yet usable
        snapshot_store.add(snapshot(T0 + timedelta(minutes=28), lp=58))
        results = await aggregator.refresh_matches(account, 10)

        assert results[0].status is ItemStatus.SKIPPED
        assert aggregate_store.get("EUW1_1:tester").lp_delta is None

    @pytest.mark.asyncio
    async def test_unranked_match_is_never_backfilled(self, account, aggregate_store, snapshot_store):
        snapshot_store.add(snapshot(T0 - timedelta(minutes=10), lp=40))
        snapshot_store.add(snapshot(T0 + timedelta(hours=1), lp=60))
        repo = make_repo(match("EUW1_1", queue_id=450))
        aggregator = make_aggregator(repo, aggregate_store, snapshot_store)

        await aggregator.refresh_matches(account, 10)
        results = await aggregator.refresh_matches(account, 10)

        assert results[0].status is ItemStatus.SKIPPED
        assert aggregate_store.get("EUW1_1:tester").lp_delta is None

    @pytest.mark.asyncio
    async def test_failed_match_fetch_does_not_stop_batch(self, account, aggregate_store, snapshot_store):
        good = match("EUW1_1")
        repo = AsyncMock()
        repo.get_recent_match_ids.return_value = ["EUW1_2", "EUW1_1"]

        async def get_match(acc, match_id):
            if match_id == "EUW1_2":
                raise HttpError(500, "boom")
            return good

        repo.get_match.side_effect = get_match

        results = await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.FAILED, ItemStatus.OK]
        assert not aggregate_store.exists("EUW1_2:tester")
        assert aggregate_store.exists("EUW1_1:tester")

    @pytest.mark.asyncio
    async def test_missing_participant_is_skipped(self, account, aggregate_store, snapshot_store):
        repo = make_repo(match("EUW1_1", puuid="someone-else"))

        results = await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert results[0].status is ItemStatus.SKIPPED
        assert not aggregate_store.exists("EUW1_1:tester")

    @pytest.mark.asyncio
    async def test_match_id_failure_returns_single_failed_item(self, account, aggregate_store, snapshot_store):
        repo = AsyncMock()
        repo.get_recent_match_ids.side_effect = HttpError(0, "timeout")

        results = await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 10)

        assert len(results) == 1
        assert results[0].is_failure
        repo.get_match.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_limit_fetches_nothing(self, account, aggregate_store, snapshot_store):
        repo = make_repo(match("EUW1_1"))

        results = await make_aggregator(repo, aggregate_store, snapshot_store).refresh_matches(account, 0)

        assert results == []
        repo.get_recent_match_ids.assert_not_awaited()


def live_api(bad_response):
    """RiotAPIClient over a mock transport: EUW1_BAD answers ``bad_response``, EUW1_1 a valid match."""
    def handler(request):
        path = request.url.path
        if path.endswith("/ids"):
            return httpx.Response(200, json=["EUW1_BAD", "EUW1_1"])
        if path.endswith("/EUW1_BAD"):
            return bad_response
        if path.endswith("/EUW1_1"):
            return httpx.Response(200, json=match_payload("EUW1_1"))
        return httpx.Response(404)

    return RiotAPIClient(
        "test-key",
        rate_limiter=TokenBucket(capacity=100, refill_rate=100.0),
        transport=httpx.MockTransport(handler),
    )


class TestMalformedMatchDetail:

    @pytest.mark.parametrize("bad_response", [
        httpx.Response(200, json={"metadata": {"matchId": "EUW1_BAD"}, "info": None}),
        httpx.Response(200, json=[]),
        httpx.Response(200, text="<html>gateway</html>"),
    ], ids=["null-info", "list-body", "non-json-body"])
    @pytest.mark.asyncio
    async def test_bad_match_fails_alone(self, bad_response, account, aggregate_store, snapshot_store):
        async with live_api(bad_response) as api:
            aggregator = make_aggregator(MatchRepository(api), aggregate_store, snapshot_store)
            results = await aggregator.refresh_matches(account, 10)

        assert [r.status for r in results] == [ItemStatus.FAILED, ItemStatus.OK]
        assert isinstance(results[0].error, RiotAPIError)
        assert not aggregate_store.exists("EUW1_BAD:tester")
        assert aggregate_store.exists("EUW1_1:tester")
