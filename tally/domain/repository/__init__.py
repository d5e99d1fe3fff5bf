"""Repository interfaces for the tally domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tally.domain.repository.counter import CounterRepository
from tally.domain.repository.unit_of_work import UnitOfWork, VotingTransaction
from tally.domain.repository.voting import VotingRepository

__all__ = [
    "CounterRepository",
    "UnitOfWork",
    "VotingRepository",
    "VotingTransaction",
]
