"""Use case for reading an account's profile view."""
from __future__ import annotations

from typing import List, Optional

from config.accounts import ACCOUNTS, by_slug
from domain.entities import Account, ProfileData
from domain.exceptions import NotConfigured
from domain.interfaces import IAccountStore
from application.services import ProfileViewBuilder


class GetProfileUseCase:
    """Look up a configured, seeded account and build its profile from stored data."""

    def __init__(
        self,
        builder: ProfileViewBuilder,
        account_store: IAccountStore,
        accounts: Optional[List[Account]] = None,
    ):
        self.builder = builder
        self.account_store = account_store
        self.accounts = accounts if accounts is not None else ACCOUNTS

    def execute(self, slug: str) -> ProfileData:
        if by_slug(slug, self.accounts) is None:
            raise NotConfigured(slug)
        account = self.account_store.get(slug)
        if account is None:
            raise NotConfigured(slug, where="store")
        return self.builder.build_profile(account)
