"""Voting repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from tally.domain.model.voting import Voting
from tally.domain.value import ParticipantRef, VoteDirection


class VotingRepository(ABC):
    """Repository for the Voting ledger.

    Defines the contract for ledger persistence operations. Implementations
    never touch counters; that is the coordinator's job.
    """

    @abstractmethod
    async def find(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        *,
        for_update: bool = False,
    ) -> Optional[Voting]:
        """Find the voting of a voter on a voteable.

        Args:
            voter: The voter's reference
            voteable: The voteable's reference
            for_update: Lock the entry until the transaction ends

        Returns:
            The voting if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        direction: VoteDirection,
    ) -> Voting:
        """Create a voting.

        Args:
            voter: The voter's reference
            voteable: The voteable's reference
            direction: Direction of the vote

        Returns:
            The created voting

        Raises:
            DuplicateEntryError: If a voting already exists for this pair
        """
        pass

    @abstractmethod
    async def update_direction(
        self, voting: Voting, direction: VoteDirection
    ) -> Voting:
        """Change the direction of an existing voting.

        Args:
            voting: The voting to update
            direction: New direction

        Returns:
            The updated voting
        """
        pass

    @abstractmethod
    async def delete(self, voting: Voting) -> None:
        """Delete a voting.

        Args:
            voting: The voting to delete
        """
        pass

    @abstractmethod
    async def find_by_voter(self, voter: ParticipantRef) -> List[Voting]:
        """Find all votings cast by a voter."""
        pass

    @abstractmethod
    async def find_by_voteable(self, voteable: ParticipantRef) -> List[Voting]:
        """Find all votings on a voteable."""
        pass

    @abstractmethod
    async def find_by_voter_and_voteables(
        self,
        voter: ParticipantRef,
        voteables: Sequence[ParticipantRef],
    ) -> List[Voting]:
        """Find a voter's votings on multiple voteables (batch query).

        Args:
            voter: The voter's reference
            voteables: Voteables to check

        Returns:
            List of votings by the voter on the given voteables
        """
        pass

    @abstractmethod
    async def count_by_voteable(
        self,
        voteable: ParticipantRef,
        direction: Optional[VoteDirection] = None,
    ) -> int:
        """Count votings on a voteable.

        Args:
            voteable: The voteable's reference
            direction: Only count votings in this direction

        Returns:
            Number of votings
        """
        pass
