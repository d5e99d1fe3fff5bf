"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tally.config import Settings
from tally.domain.repository import CounterRepository, UnitOfWork, VotingRepository
from tally.persistence.counters import CounterTables
from tally.persistence.database import create_engine, create_session_factory
from tally.persistence.repository import (
    PostgresCounterRepository,
    PostgresUnitOfWork,
    PostgresVotingRepository,
)
from tally.util.di.base import ProviderBase
from tally.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Host applications that keep counters on their own tables pass a provider
    for ``CounterTables`` to ``create_container``.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_counter_tables(self) -> CounterTables:
        """Provide counter table registry (all types use vote_counters)."""
        return CounterTables()

    @provide(scope=Scope.APP)
    def get_unit_of_work(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        counter_tables: CounterTables,
    ) -> UnitOfWork:
        """Provide unit of work for vote transitions."""
        return PostgresUnitOfWork(session_factory, counter_tables)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Used by read-side repositories. The session is committed at the end
        of the request if no exception occurred, or rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_voting_repository(self, session: AsyncSession) -> VotingRepository:
        """Provide Voting repository."""
        return PostgresVotingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_counter_repository(
        self, session: AsyncSession, counter_tables: CounterTables
    ) -> CounterRepository:
        """Provide Counter repository."""
        return PostgresCounterRepository(session, counter_tables)
