"""Pytest fixtures: in-memory SQLite stores, a seeded account and fake clocks."""
import pytest

from domain.entities import Account
from domain.enums import Platform
from infrastructure import AccountStore, ChampionStore, Database, MatchAggregateStore, SnapshotStore

from factories import PUUID, FakeClock, FakeTime


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def account_store(db):
    return AccountStore(db)


@pytest.fixture
def snapshot_store(db):
    return SnapshotStore(db)


@pytest.fixture
def aggregate_store(db):
    return MatchAggregateStore(db)


@pytest.fixture
def champion_store(db):
    return ChampionStore(db)


@pytest.fixture
def account(account_store):
    """A tracked, already resolved account present in the store."""
    return account_store.upsert(Account("tester", "Tester", "EUW", Platform.EUW1, PUUID))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_time():
    return FakeTime()
