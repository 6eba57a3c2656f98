"""Infrastructure layer - API clients, API repositories and the SQLite store."""
from .api import RiotAPIClient, TokenBucket, DataDragonClient
from .repositories import MatchRepository, LeagueRepository
from .persistence import Database, AccountStore, SnapshotStore, MatchAggregateStore, ChampionStore

__all__ = [
    'RiotAPIClient',
    'TokenBucket',
    'DataDragonClient',
    'MatchRepository',
    'LeagueRepository',
    'Database',
    'AccountStore',
    'SnapshotStore',
    'MatchAggregateStore',
    'ChampionStore',
]
