"""Match repository implementation."""
import logging
from datetime import datetime, timezone
from typing import List

from domain.entities import Account, Match, Participant
from domain.enums import Role
from domain.exceptions import RiotAPIError
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


def _require_puuid(account: Account) -> str:
    if not account.is_resolved:
        raise RiotAPIError(f"Account {account.slug} has no resolved PUUID")
    return account.puuid


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_recent_match_ids(self, account: Account, count: int) -> List[str]:
        """Get the most recent match IDs of an account, newest first."""
        return await self.api_client.get_match_ids(account.platform, _require_puuid(account), count)

    async def get_match(self, account: Account, match_id: str) -> Match:
        """
        Get a single match by ID.

        Raises:
            RiotAPIError: the call failed or the payload could not be parsed
        """
        match_data = await self.api_client.get_match(account.platform, match_id)
        try:
            return self._parse_match_data(match_data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Error parsing match {match_id}: {e!r}")
            raise RiotAPIError(f"Malformed match payload for {match_id}") from e

    def _parse_match_data(self, data: dict) -> Match:
        """Parse raw API match data into Match entity."""
        if not isinstance(data, dict) or not isinstance(data.get('info'), dict):
            raise TypeError(f"expected an object with an 'info' object, got {type(data).__name__}")
        metadata = data.get('metadata') or {}
        info = data['info']

        return Match(
            match_id=metadata.get('matchId', ''),
            queue_id=info.get('queueId', 0),
            game_creation=datetime.fromtimestamp(info['gameCreation'] / 1000, tz=timezone.utc),
            game_duration=self._duration_seconds(info),
            participants=[self._parse_participant_data(p) for p in info.get('participants', [])],
        )

    @staticmethod
    def _duration_seconds(info: dict) -> int:
        # Before patch 11.20 gameDuration was reported in milliseconds and
        # gameEndTimestamp did not exist.
        duration = int(info.get('gameDuration', 0))
        if 'gameEndTimestamp' not in info and duration > 60 * 60 * 24:
            return duration // 1000
        return duration

    def _parse_participant_data(self, p_data: dict) -> Participant:
        """Parse raw participant data into Participant entity."""
        return Participant(
            puuid=p_data.get('puuid', ''),
            team_id=p_data.get('teamId', 0),
            champion_id=p_data.get('championId', 0),
            champion_name=p_data.get('championName', ''),
            team_position=Role.from_string(p_data.get('teamPosition')),
            win=bool(p_data.get('win', False)),
            kills=p_data.get('kills', 0),
            deaths=p_data.get('deaths', 0),
            assists=p_data.get('assists', 0),
            total_minions_killed=p_data.get('totalMinionsKilled', 0),
            neutral_minions_killed=p_data.get('neutralMinionsKilled', 0),
            gold_earned=p_data.get('goldEarned', 0),
            total_damage_dealt_to_champions=p_data.get('totalDamageDealtToChampions', 0),
        )
