"""Application layer - Services and use cases."""
from .results import ItemStatus, ItemResult, AccountRefreshResult
from .services import (
    IdentityResolver,
    RankSnapshotTracker,
    MatchAggregator,
    ProfileViewBuilder,
    ChampionCatalogService,
)
from .use_cases import RefreshAccountUseCase, RefreshAllAccountsUseCase, GetProfileUseCase

__all__ = [
    'ItemStatus',
    'ItemResult',
    'AccountRefreshResult',
    'IdentityResolver',
    'RankSnapshotTracker',
    'MatchAggregator',
    'ProfileViewBuilder',
    'ChampionCatalogService',
    'RefreshAccountUseCase',
    'RefreshAllAccountsUseCase',
    'GetProfileUseCase',
]
