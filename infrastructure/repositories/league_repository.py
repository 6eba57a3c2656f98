"""League (ranked standing) repository implementation."""
import logging
from typing import List

from domain.entities import Account, LeagueEntry
from domain.exceptions import RiotAPIError
from domain.interfaces import ILeagueRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class LeagueRepository(ILeagueRepository):
    """Repository for current ranked standings using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def get_entries(self, account: Account) -> List[LeagueEntry]:
        """
        Get every league entry of an account (one per ranked queue played).

        Returns:
            Entries in API order; empty for unranked accounts
        """
        if not account.puuid:
            raise RiotAPIError(f"Account {account.slug} has no resolved PUUID")
        raw = await self.api_client.get_league_entries(account.platform, account.puuid)

        entries: List[LeagueEntry] = []
        for item in raw:
            try:
                entries.append(LeagueEntry.from_api(item))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed league entry for {account.slug}: {e!r}")
        return entries
