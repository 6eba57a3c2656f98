"""Tests for the API-backed league and match repositories."""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from domain.entities import Account
from domain.enums import Platform, Role
from domain.exceptions import RiotAPIError
from infrastructure.repositories import LeagueRepository, MatchRepository

from factories import PUUID, match_payload

ACCOUNT = Account("tester", "Tester", "EUW", Platform.EUW1, PUUID)


class TestMatchRepository:

    @pytest.mark.asyncio
    async def test_parses_match(self):
        api = AsyncMock()
        api.get_match.return_value = match_payload()

        m = await MatchRepository(api).get_match(ACCOUNT, "EUW1_1")

        api.get_match.assert_awaited_once_with(Platform.EUW1, "EUW1_1")
        assert m.match_id == "EUW1_1"
        assert m.game_creation == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert m.game_duration == 1800
        me = m.participant_for(PUUID)
        assert me.creep_score == 200
        assert me.team_position is Role.MIDDLE
        assert m.participant_for("enemy").team_position is None

    @pytest.mark.asyncio
    async def test_legacy_millisecond_duration(self):
        api = AsyncMock()
        api.get_match.return_value = match_payload(legacy=True)

        m = await MatchRepository(api).get_match(ACCOUNT, "EUW1_1")

        assert m.game_duration == 1800

    @pytest.mark.asyncio
    async def test_malformed_payload_raises(self):
        api = AsyncMock()
        api.get_match.return_value = {"metadata": {"matchId": "EUW1_1"}}

        with pytest.raises(RiotAPIError):
            await MatchRepository(api).get_match(ACCOUNT, "EUW1_1")

    @pytest.mark.parametrize("payload", [
        {"metadata": {"matchId": "EUW1_1"}, "info": None},
        [],
        None,
        {"metadata": {"matchId": "EUW1_1"}, "info": {"gameCreation": 1714564800000, "participants": ["x"]}},
    ])
    @pytest.mark.asyncio
    async def test_wrong_payload_shape_raises(self, payload):
        api = AsyncMock()
        api.get_match.return_value = payload

        with pytest.raises(RiotAPIError):
            await MatchRepository(api).get_match(ACCOUNT, "EUW1_1")

    @pytest.mark.asyncio
    async def test_recent_ids_require_puuid(self):
        api = AsyncMock()
        with pytest.raises(RiotAPIError):
            await MatchRepository(api).get_recent_match_ids(ACCOUNT.with_puuid(""), 10)
        api.get_match_ids.assert_not_awaited()


class TestLeagueRepository:

    @pytest.mark.asyncio
    async def test_parses_entries_and_skips_malformed(self):
        api = AsyncMock()
        api.get_league_entries.return_value = [
            {"queueType": "RANKED_SOLO_5x5", "tier": "GOLD", "rank": "II", "leaguePoints": 40,
             "wins": 10, "losses": 8, "hotStreak": True},
            {"tier": "SILVER"},
            "RANKED_FLEX_SR",
        ]

        entries = await LeagueRepository(api).get_entries(ACCOUNT)

        assert len(entries) == 1
        assert entries[0].standing == ("GOLD", "II", 40, 10, 8, True)
        api.get_league_entries.assert_awaited_once_with(Platform.EUW1, PUUID)
