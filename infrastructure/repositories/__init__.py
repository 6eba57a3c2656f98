"""Infrastructure repositories module (Riot API backed)."""
from .match_repository import MatchRepository
from .league_repository import LeagueRepository

__all__ = [
    'MatchRepository',
    'LeagueRepository',
]
