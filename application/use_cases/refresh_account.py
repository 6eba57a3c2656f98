"""Use cases for refreshing tracked accounts: rank first, then matches."""
from __future__ import annotations

from typing import List, Optional

from config.accounts import ACCOUNTS, by_slug
from core.logging.context import log_context
from core.logging.logger import get_logger, timed
from domain.entities import Account
from domain.exceptions import NotConfigured, TrackerError
from application.results import AccountRefreshResult
from application.services import IdentityResolver, MatchAggregator, RankSnapshotTracker


class RefreshAccountUseCase:
    """
    Refreshes one configured account.

    The rank step always runs before the match step so that the snapshot
    taken now can close the LP bracket of the matches fetched right after.
    Rank and per-match failures come back as failed items on the result;
    identity failures and unknown slugs raise.
    """

    def __init__(
        self,
        resolver: IdentityResolver,
        tracker: RankSnapshotTracker,
        aggregator: MatchAggregator,
        accounts: Optional[List[Account]] = None,
        match_limit: Optional[int] = None,
    ):
        self.resolver = resolver
        self.tracker = tracker
        self.aggregator = aggregator
        self.accounts = accounts if accounts is not None else ACCOUNTS
        self.match_limit = match_limit
        self._log = get_logger(__name__, service="refresh")

    @timed("account refresh")
    async def execute(self, slug: str) -> AccountRefreshResult:
        configured = by_slug(slug, self.accounts)
        if configured is None:
            raise NotConfigured(slug)

        with log_context(account=slug):
            account = await self.resolver.ensure_resolved(configured)
            result = AccountRefreshResult(slug=slug)
            result.rank = await self.tracker.refresh_rank(account)
            result.matches = await self.aggregator.refresh_matches(account, self.match_limit)
            if result.ok:
                self._log.success(result.summary())
            else:
                self._log.warning(result.summary())
            return result


class RefreshAllAccountsUseCase:
    """Refreshes every configured account in order; one failure never stops the loop."""

    def __init__(self, refresh_account: RefreshAccountUseCase, accounts: Optional[List[Account]] = None):
        self.refresh_account = refresh_account
        self.accounts = accounts if accounts is not None else refresh_account.accounts
        self._log = get_logger(__name__, service="refresh")

    async def execute(self) -> List[AccountRefreshResult]:
        results: List[AccountRefreshResult] = []
        for account in self.accounts:
            try:
                results.append(await self.refresh_account.execute(account.slug))
            except TrackerError as exc:
                self._log.error(lambda: f"Error processing account {account.slug}: {exc}")
                results.append(AccountRefreshResult(slug=account.slug, error=exc))
            except Exception as exc:
                self._log.exception(lambda: f"Unexpected error processing account {account.slug}: {exc!r}")
                results.append(AccountRefreshResult(slug=account.slug, error=exc))
        failed = sum(1 for r in results if r.error is not None)
        self._log.info(lambda: f"Refreshed {len(results) - failed}/{len(results)} accounts")
        return results
