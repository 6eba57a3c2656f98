"""Domain layer - Business entities, enums, rank arithmetic and interfaces."""
from .entities import (
    Account, Match, Participant, LeagueEntry, Snapshot, MatchAggregate,
    Champion, ProfileData,
)
from .enums import Platform, QueueType, Tier, Division, Role
from .exceptions import TrackerError, RiotAPIError, HttpError, RateLimited, NotFound, NotConfigured
from .interfaces import (
    ILeagueRepository, IMatchRepository,
    IAccountStore, ISnapshotStore, IMatchAggregateStore, IChampionStore,
)

__all__ = [
    # Entities
    'Account',
    'Match',
    'Participant',
    'LeagueEntry',
    'Snapshot',
    'MatchAggregate',
    'Champion',
    'ProfileData',
    # Enums
    'Platform',
    'QueueType',
    'Tier',
    'Division',
    'Role',
    # Errors
    'TrackerError',
    'RiotAPIError',
    'HttpError',
    'RateLimited',
    'NotFound',
    'NotConfigured',
    # Interfaces
    'ILeagueRepository',
    'IMatchRepository',
    'IAccountStore',
    'ISnapshotStore',
    'IMatchAggregateStore',
    'IChampionStore',
]
