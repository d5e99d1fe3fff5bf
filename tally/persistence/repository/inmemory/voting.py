"""In-memory voting repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

from tally.domain.error import DuplicateEntryError
from tally.domain.model.voting import Voting
from tally.domain.repository.voting import VotingRepository
from tally.domain.value import ParticipantRef, VoteDirection, VotingId

_PairKey = tuple[ParticipantRef, ParticipantRef]


class InMemoryVotingRepository(VotingRepository):
    """In-memory implementation of VotingRepository for testing."""

    def __init__(self) -> None:
        self._votings: dict[_PairKey, Voting] = {}

    async def find(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        *,
        for_update: bool = False,
    ) -> Optional[Voting]:
        """Find a voting by voter and voteable."""
        return self._votings.get((voter, voteable))

    async def create(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        direction: VoteDirection,
    ) -> Voting:
        """Create a voting.

        Raises:
            DuplicateEntryError: If a voting already exists for this pair
        """
        if (voter, voteable) in self._votings:
            raise DuplicateEntryError(str(voter), str(voteable))

        now = datetime.now()
        voting = Voting(
            id=VotingId(uuid4()),
            voter=voter,
            voteable=voteable,
            direction=direction,
            created_at=now,
            updated_at=now,
        )
        self._votings[(voter, voteable)] = voting
        return voting

    async def update_direction(
        self, voting: Voting, direction: VoteDirection
    ) -> Voting:
        """Change the direction of a voting."""
        updated = voting.model_copy(
            update={"direction": direction, "updated_at": datetime.now()}
        )
        self._votings[(voting.voter, voting.voteable)] = updated
        return updated

    async def delete(self, voting: Voting) -> None:
        """Delete a voting."""
        self._votings.pop((voting.voter, voting.voteable), None)

    async def find_by_voter(self, voter: ParticipantRef) -> list[Voting]:
        """Find all votings cast by a voter."""
        return [v for v in self._votings.values() if v.voter == voter]

    async def find_by_voteable(self, voteable: ParticipantRef) -> list[Voting]:
        """Find all votings on a voteable."""
        return [v for v in self._votings.values() if v.voteable == voteable]

    async def find_by_voter_and_voteables(
        self,
        voter: ParticipantRef,
        voteables: Sequence[ParticipantRef],
    ) -> list[Voting]:
        """Find a voter's votings on multiple voteables (batch query)."""
        if not voteables:
            return []

        wanted = set(voteables)
        return [
            v
            for v in self._votings.values()
            if v.voter == voter and v.voteable in wanted
        ]

    async def count_by_voteable(
        self,
        voteable: ParticipantRef,
        direction: Optional[VoteDirection] = None,
    ) -> int:
        """Count votings on a voteable."""
        return sum(
            1
            for v in self._votings.values()
            if v.voteable == voteable and (direction is None or v.direction == direction)
        )

    def snapshot(self) -> dict[_PairKey, Voting]:
        """Capture the current state for rollback."""
        return dict(self._votings)

    def restore(self, snapshot: dict[_PairKey, Voting]) -> None:
        """Restore a state captured by snapshot()."""
        self._votings = dict(snapshot)
