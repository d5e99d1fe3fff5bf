"""In-memory repository implementations for testing."""

from .counter import InMemoryCounterRepository
from .unit_of_work import InMemoryUnitOfWork
from .voting import InMemoryVotingRepository

__all__ = [
    "InMemoryCounterRepository",
    "InMemoryUnitOfWork",
    "InMemoryVotingRepository",
]
