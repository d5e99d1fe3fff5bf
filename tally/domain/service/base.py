"""Base class for domain services."""

from tally.domain.repository import UnitOfWork


class Service:
    """Base class for domain services that write through a unit of work.

    Each public operation opens its own transaction; a service instance holds
    no state between calls beyond its collaborators.
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        self.unit_of_work = unit_of_work
