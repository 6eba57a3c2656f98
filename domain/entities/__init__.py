"""Domain entities."""
from .account import Account
from .participant import Participant
from .match import Match
from .snapshot import LeagueEntry, Snapshot, standing_changed
from .match_aggregate import MatchAggregate, aggregate_key
from .champion import Champion, champion_label
from .profile import RankData, RankHistoryPoint, MatchView, ChampionStats, ProfileData

__all__ = [
    'Account',
    'Participant',
    'Match',
    'LeagueEntry',
    'Snapshot',
    'standing_changed',
    'MatchAggregate',
    'aggregate_key',
    'Champion',
    'champion_label',
    'RankData',
    'RankHistoryPoint',
    'MatchView',
    'ChampionStats',
    'ProfileData',
]
