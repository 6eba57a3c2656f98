"""Presentation CLI exports."""
from .seed_command import SeedCommand
from .refresh_command import RefreshCommand
from .profile_command import ProfileCommand
from .champions_command import ChampionsCommand

__all__ = [
    "SeedCommand",
    "RefreshCommand",
    "ProfileCommand",
    "ChampionsCommand",
]
