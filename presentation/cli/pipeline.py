"""Wiring of stores, services and use cases for the CLI commands."""
from __future__ import annotations

from typing import List, Optional

from config import settings
from config.accounts import ACCOUNTS
from domain.entities import Account
from infrastructure import (
    AccountStore,
    ChampionStore,
    Database,
    LeagueRepository,
    MatchAggregateStore,
    MatchRepository,
    RiotAPIClient,
    SnapshotStore,
)
from application.services import IdentityResolver, MatchAggregator, ProfileViewBuilder, RankSnapshotTracker
from application.use_cases import GetProfileUseCase, RefreshAccountUseCase, RefreshAllAccountsUseCase


def open_database() -> Database:
    settings.create_directories()
    return Database(settings.db_path)


class Stores:
    """The four SQLite-backed stores sharing one connection."""

    def __init__(self, db: Database):
        self.accounts = AccountStore(db)
        self.snapshots = SnapshotStore(db)
        self.aggregates = MatchAggregateStore(db)
        self.champions = ChampionStore(db)


def build_refresh(
    api: RiotAPIClient,
    stores: Stores,
    accounts: Optional[List[Account]] = None,
) -> RefreshAllAccountsUseCase:
    accounts = accounts if accounts is not None else ACCOUNTS
    refresh_one = RefreshAccountUseCase(
        resolver=IdentityResolver(api, stores.accounts),
        tracker=RankSnapshotTracker(LeagueRepository(api), stores.snapshots),
        aggregator=MatchAggregator(MatchRepository(api), stores.aggregates, stores.snapshots),
        accounts=accounts,
    )
    return RefreshAllAccountsUseCase(refresh_one, accounts)


def build_get_profile(stores: Stores, accounts: Optional[List[Account]] = None) -> GetProfileUseCase:
    builder = ProfileViewBuilder(stores.snapshots, stores.aggregates, stores.champions)
    return GetProfileUseCase(builder, stores.accounts, accounts)
