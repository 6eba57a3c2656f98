"""SQLite implementation of the store contracts."""
from .database import Database
from .account_store import AccountStore
from .snapshot_store import SnapshotStore
from .match_aggregate_store import MatchAggregateStore
from .champion_store import ChampionStore

__all__ = [
    'Database',
    'AccountStore',
    'SnapshotStore',
    'MatchAggregateStore',
    'ChampionStore',
]
