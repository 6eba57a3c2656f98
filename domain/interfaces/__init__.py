"""Domain interfaces."""
from .repository import (
    ILeagueRepository,
    IMatchRepository,
    IAccountStore,
    ISnapshotStore,
    IMatchAggregateStore,
    IChampionStore,
)

__all__ = [
    'ILeagueRepository',
    'IMatchRepository',
    'IAccountStore',
    'ISnapshotStore',
    'IMatchAggregateStore',
    'IChampionStore',
]
