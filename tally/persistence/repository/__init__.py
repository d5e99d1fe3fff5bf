"""PostgreSQL repository implementations."""

from tally.persistence.repository.counter import PostgresCounterRepository
from tally.persistence.repository.unit_of_work import PostgresUnitOfWork
from tally.persistence.repository.voting import PostgresVotingRepository

__all__ = [
    "PostgresCounterRepository",
    "PostgresUnitOfWork",
    "PostgresVotingRepository",
]
