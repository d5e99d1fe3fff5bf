"""In-memory counter repository for testing."""

from tally.domain.repository.counter import CounterRepository
from tally.domain.value import CounterDelta, ParticipantRef, VoteCounts


class InMemoryCounterRepository(CounterRepository):
    """In-memory implementation of CounterRepository for testing.

    Participants start at zero, matching the ``vote_counters`` upsert.
    """

    def __init__(self) -> None:
        self._counts: dict[ParticipantRef, VoteCounts] = {}

    async def get(self, participant: ParticipantRef) -> VoteCounts:
        """Read a participant's stored counts."""
        return self._counts.get(participant, VoteCounts())

    async def apply(
        self, participant: ParticipantRef, delta: CounterDelta
    ) -> VoteCounts:
        """Add a delta to a participant's counts."""
        counts = self._counts.get(participant, VoteCounts()).apply(delta)
        self._counts[participant] = counts
        return counts

    def snapshot(self) -> dict[ParticipantRef, VoteCounts]:
        """Capture the current state for rollback."""
        return dict(self._counts)

    def restore(self, snapshot: dict[ParticipantRef, VoteCounts]) -> None:
        """Restore a state captured by snapshot()."""
        self._counts = dict(snapshot)
