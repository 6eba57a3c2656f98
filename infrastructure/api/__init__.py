"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import TokenBucket
from .ddragon_client import DataDragonClient

__all__ = [
    'RiotAPIClient',
    'TokenBucket',
    'DataDragonClient',
]
