"""Configuration: environment-backed settings and the tracked-account list."""
from .settings import settings, Settings

__all__ = ['settings', 'Settings']
