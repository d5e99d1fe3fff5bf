"""Counter repository interface."""

from abc import ABC, abstractmethod

from tally.domain.value import CounterDelta, ParticipantRef, VoteCounts


class CounterRepository(ABC):
    """Repository for participants' up/down aggregates.

    Counters are cached aggregates maintained by the coordinator. Updates
    must be atomic adds in the store, never read-modify-write.
    """

    @abstractmethod
    async def get(self, participant: ParticipantRef) -> VoteCounts:
        """Read a participant's stored counts.

        Args:
            participant: The participant's reference

        Returns:
            Stored counts, zeros if nothing was recorded yet
        """
        pass

    @abstractmethod
    async def apply(
        self, participant: ParticipantRef, delta: CounterDelta
    ) -> VoteCounts:
        """Atomically add a delta to a participant's counts.

        Args:
            participant: The participant's reference
            delta: Change to the up and down counters

        Returns:
            Counts after the update

        Raises:
            NotFoundError: If the participant has no counter row to update
        """
        pass
