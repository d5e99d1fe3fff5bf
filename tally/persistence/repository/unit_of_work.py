"""PostgreSQL implementation of the unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tally.domain.error import TransactionError
from tally.domain.repository import UnitOfWork, VotingTransaction
from tally.persistence.counters import CounterTables
from tally.persistence.repository.counter import PostgresCounterRepository
from tally.persistence.repository.voting import PostgresVotingRepository


class PostgresUnitOfWork(UnitOfWork):
    """Runs each transaction on its own session.

    The session is committed when the block exits cleanly and rolled back
    otherwise; nothing is held once the block returns.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        counter_tables: CounterTables,
    ) -> None:
        """Initialize unit of work.

        Args:
            session_factory: Factory for creating database sessions
            counter_tables: Host tables holding participants' counters
        """
        self.session_factory = session_factory
        self.counter_tables = counter_tables

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[VotingTransaction]:
        """Open a transaction spanning the ledger and the counters."""
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield VotingTransaction(
                        votings=PostgresVotingRepository(session),
                        counters=PostgresCounterRepository(
                            session, self.counter_tables
                        ),
                    )
            except SQLAlchemyError as e:
                logfire.warn("Transaction rolled back", error=str(e))
                raise TransactionError(str(e)) from e
