"""Unit of work interface.

A vote transition writes the ledger and up to two counter rows. The unit of
work binds those writes to one storage transaction so they commit or roll
back together.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from tally.domain.repository.counter import CounterRepository
from tally.domain.repository.voting import VotingRepository


@dataclass(frozen=True)
class VotingTransaction:
    """Repositories bound to one open transaction."""

    votings: VotingRepository
    counters: CounterRepository


class UnitOfWork(ABC):
    """Opens atomic units spanning the ledger and the counters."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[VotingTransaction]:
        """Open a transaction.

        Leaving the context normally commits. Leaving it with an exception
        rolls back every write made through the yielded repositories and
        re-raises.

        Usage:
            async with unit_of_work.transaction() as tx:
                voting = await tx.votings.find(voter, voteable, for_update=True)
        """
        pass
