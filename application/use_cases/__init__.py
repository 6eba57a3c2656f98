"""Application use cases."""
from .refresh_account import RefreshAccountUseCase, RefreshAllAccountsUseCase
from .get_profile import GetProfileUseCase

__all__ = [
    'RefreshAccountUseCase',
    'RefreshAllAccountsUseCase',
    'GetProfileUseCase',
]
