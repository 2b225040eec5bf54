"""
SQLAlchemy engine and session management

This module provides:
1. Base: declarative base every traited model maps onto
2. Database: engine + session factory with a unit-of-work style session()

Mapper-level hooks registered by the hashing and validating observers run
inside Session.flush(), so any session produced here triggers them.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from model_traits.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith('sqlite') and (url.rstrip('/') == 'sqlite:' or ':memory:' in url)


class Database:
    def __init__(self, *, url: str, echo: bool = False) -> None:
        self.url = url
        self._engine: Engine = self._create_engine(url, echo=echo)
        self._session_maker = sessionmaker(bind=self._engine, expire_on_commit=False)

    @staticmethod
    def _create_engine(url: str, *, echo: bool) -> Engine:
        if _is_memory_sqlite(url):
            # One shared connection, otherwise every checkout sees an empty database
            return create_engine(
                url,
                echo=echo,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool,
            )
        return create_engine(url, echo=echo, pool_pre_ping=True)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        Base.metadata.create_all(self._engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(self._engine)

    def new_session(self) -> Session:
        return self._session_maker()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Commit on success, roll back and re-raise on any error (including aborted hooks)"""
        session = self._session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            Logger.base.warning('Session rolled back')
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self._engine.dispose()
