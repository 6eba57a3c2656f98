"""Domain enumerations."""
from .platform import Platform
from .queue_type import QueueType
from .tier import Tier, Division
from .role import Role

__all__ = [
    'Platform',
    'QueueType',
    'Tier',
    'Division',
    'Role',
]
