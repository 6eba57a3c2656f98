"""Presentation layer - User interfaces."""
from .cli import SeedCommand, RefreshCommand, ProfileCommand, ChampionsCommand

__all__ = [
    "SeedCommand",
    "RefreshCommand",
    "ProfileCommand",
    "ChampionsCommand",
]
