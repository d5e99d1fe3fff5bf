"""In-memory unit of work for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from tally.domain.repository.unit_of_work import UnitOfWork, VotingTransaction

from .counter import InMemoryCounterRepository
from .voting import InMemoryVotingRepository


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork for testing.

    Transactions are serialized by a lock and roll back by restoring
    snapshots taken when they opened.
    """

    def __init__(
        self,
        votings: InMemoryVotingRepository,
        counters: InMemoryCounterRepository,
    ) -> None:
        self.votings = votings
        self.counters = counters
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[VotingTransaction]:
        """Open a serialized transaction."""
        async with self._lock:
            votings_snapshot = self.votings.snapshot()
            counters_snapshot = self.counters.snapshot()
            try:
                yield VotingTransaction(votings=self.votings, counters=self.counters)
            except BaseException:
                self.votings.restore(votings_snapshot)
                self.counters.restore(counters_snapshot)
                raise
