"""Application services root exports."""
from .identity_resolver import IdentityResolver
from .rank_tracker import RankSnapshotTracker
from .match_aggregator import MatchAggregator
from .profile_builder import ProfileViewBuilder
from .champion_catalog import ChampionCatalogService

__all__ = [
    "IdentityResolver",
    "RankSnapshotTracker",
    "MatchAggregator",
    "ProfileViewBuilder",
    "ChampionCatalogService",
]
