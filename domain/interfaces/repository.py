"""Repository interfaces for data access.

API-backed repositories are async (every call goes through the rate
limiter); store-backed ones are synchronous keyed-store contracts.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from ..entities import Account, Champion, LeagueEntry, Match, MatchAggregate, Snapshot


class ILeagueRepository(ABC):
    """Interface for current ranked standings."""

    @abstractmethod
    async def get_entries(self, account: Account) -> List[LeagueEntry]:
        """All current league entries of an account, one per queue."""
        pass


class IMatchRepository(ABC):
    """Interface for match data repository."""

    @abstractmethod
    async def get_recent_match_ids(self, account: Account, count: int) -> List[str]:
        """Most recent match ids, newest first."""
        pass

    @abstractmethod
    async def get_match(self, account: Account, match_id: str) -> Match:
        """Full match detail."""
        pass


class IAccountStore(ABC):
    """Tracked accounts keyed by slug."""

    @abstractmethod
    def upsert(self, account: Account) -> Account:
        pass

    @abstractmethod
    def get(self, slug: str) -> Optional[Account]:
        pass

    @abstractmethod
    def list_all(self) -> List[Account]:
        pass


class ISnapshotStore(ABC):
    """Append-only rank snapshots."""

    @abstractmethod
    def add(self, snapshot: Snapshot) -> Snapshot:
        """Append a snapshot; rejects rows older than the latest in their sequence."""
        pass

    @abstractmethod
    def latest(self, account_slug: str, queue_type: str) -> Optional[Snapshot]:
        pass

    @abstractmethod
    def latest_per_queue(self, account_slug: str) -> List[Snapshot]:
        """Most recent snapshot of every queue type, newest first."""
        pass

    @abstractmethod
    def recent(self, account_slug: str, queue_type: str, limit: int) -> List[Snapshot]:
        """Up to ``limit`` snapshots, newest first."""
        pass

    @abstractmethod
    def between(
        self,
        account_slug: str,
        queue_type: str,
        start: datetime,
        end: datetime,
    ) -> List[Snapshot]:
        """The latest snapshot at or before ``start``, the earliest at or after ``end``."""
        pass


class IMatchAggregateStore(ABC):
    """Per-(match, account) aggregates with insert-if-absent semantics."""

    @abstractmethod
    def get(self, key: str) -> Optional[MatchAggregate]:
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def insert_if_absent(self, aggregate: MatchAggregate) -> bool:
        """Insert unless the key exists; True when a row was written."""
        pass

    @abstractmethod
    def set_lp_delta(self, key: str, lp_delta: int) -> bool:
        """Fill a null LP delta once; True when a row was updated."""
        pass

    @abstractmethod
    def recent(self, account_slug: str, limit: int) -> List[MatchAggregate]:
        """Up to ``limit`` aggregates, newest match first."""
        pass


class IChampionStore(ABC):
    """Champion reference catalog."""

    @abstractmethod
    def upsert_all(self, champions: List[Champion]) -> int:
        """Insert or refresh every champion; returns the number written."""
        pass

    @abstractmethod
    def name_map(self) -> dict[int, str]:
        pass
