"""
Test Configuration and Fixtures

This module provides:
- A cheap bcrypt strategy installed as the container default for every test
- A Database from DATABASE_URL (in-memory SQLite by default) with all stub tables created per test
- A Session bound to that database

Architecture:
- Unit tests (*_unit_test.py): transient model instances, no flush
- Integration tests (*_integration_test.py): flush through a real Session
"""

from collections.abc import Generator

from dependency_injector import providers
import pytest
from sqlalchemy.orm import Session

from model_traits.hashing.driven_adapter.bcrypt_hash_strategy import BcryptHashStrategy
from model_traits.platform.config.core_setting import settings
from model_traits.platform.config.di import container
from model_traits.platform.database.orm_db_setting import Database

import test.stub_models  # noqa: F401  (registers stub tables on Base.metadata)


@pytest.fixture(autouse=True)
def fast_hash_strategy() -> Generator[BcryptHashStrategy, None, None]:
    """Minimum bcrypt cost keeps the suite fast"""
    strategy = BcryptHashStrategy(rounds=4)
    with container.hash_strategy.override(providers.Object(strategy)):
        yield strategy


@pytest.fixture
def database() -> Generator[Database, None, None]:
    database = Database(url=settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def session(database: Database) -> Generator[Session, None, None]:
    session = database.new_session()
    yield session
    session.rollback()
    session.close()
