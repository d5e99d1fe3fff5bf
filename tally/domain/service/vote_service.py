"""Vote domain service."""

from typing import Any, Optional, Sequence

import logfire

from tally.config import VotingSettings
from tally.domain.error import (
    AlreadyVotedError,
    DuplicateEntryError,
    InvalidVoteableError,
    NotVotedError,
)
from tally.domain.model import (
    VoteCounters,
    VoteOutcome,
    Voting,
    has_voter_counters,
    is_voteable,
)
from tally.domain.repository import UnitOfWork
from tally.domain.value import (
    LedgerAction,
    ParticipantRef,
    VoteAction,
    VoteCounts,
    VoteState,
)

from .base import Service
from .transition import plan_transition


def _with_counts(participant: Any, counts: Optional[VoteCounts]) -> Any:
    """Copy a participant with counters read back from storage."""
    if counts is None or not isinstance(participant, VoteCounters):
        return participant
    return participant.with_counts(counts)


class VoteService(Service):
    """Domain service coordinating votes between voters and voteables.

    Every transition reads the pair's ledger entry, plans the move with the
    vote state machine, then writes the ledger and both participants'
    counters in one unit of work.
    """

    def __init__(self, unit_of_work: UnitOfWork, settings: VotingSettings) -> None:
        """Initialize vote service.

        Args:
            unit_of_work: Opens transactions over the ledger and counters
            settings: Voting settings
        """
        super().__init__(unit_of_work)
        self.settings = settings

    def check_voteable(self, voteable: Any) -> None:
        """Ensure the target declares voting eligibility.

        Raises:
            InvalidVoteableError: If the target's class is not voteable
        """
        if not is_voteable(voteable):
            voteable_type = type(voteable).__name__
            logfire.warn("Vote on non-voteable", voteable_type=voteable_type)
            raise InvalidVoteableError(voteable_type)

    async def up_vote(self, voter: Any, voteable: Any) -> VoteOutcome:
        """Up vote a voteable.

        Turns an existing down vote into an up vote.

        Args:
            voter: The voting participant
            voteable: The participant voted on

        Returns:
            Outcome of the committed transition

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already up voted the voteable
        """
        return await self._transition(VoteAction.UP_VOTE, voter, voteable)

    async def up_vote_or_skip(self, voter: Any, voteable: Any) -> VoteOutcome | None:
        """Up vote a voteable, ignoring an existing up vote.

        Returns:
            Outcome of the transition, None if the vote was already up
        """
        try:
            return await self.up_vote(voter, voteable)
        except AlreadyVotedError:
            return None

    async def down_vote(self, voter: Any, voteable: Any) -> VoteOutcome:
        """Down vote a voteable.

        Turns an existing up vote into a down vote.

        Args:
            voter: The voting participant
            voteable: The participant voted on

        Returns:
            Outcome of the committed transition

        Raises:
            InvalidVoteableError: If the target is not voteable
            AlreadyVotedError: If the voter already down voted the voteable
        """
        return await self._transition(VoteAction.DOWN_VOTE, voter, voteable)

    async def down_vote_or_skip(
        self, voter: Any, voteable: Any
    ) -> VoteOutcome | None:
        """Down vote a voteable, ignoring an existing down vote.

        Returns:
            Outcome of the transition, None if the vote was already down
        """
        try:
            return await self.down_vote(voter, voteable)
        except AlreadyVotedError:
            return None

    async def unvote(self, voter: Any, voteable: Any) -> VoteOutcome:
        """Clear the voter's vote on a voteable.

        Args:
            voter: The voting participant
            voteable: The participant voted on

        Returns:
            Outcome of the committed transition

        Raises:
            InvalidVoteableError: If the target is not voteable
            NotVotedError: If the voter has no vote on the voteable
        """
        return await self._transition(VoteAction.UNVOTE, voter, voteable)

    async def unvote_or_skip(self, voter: Any, voteable: Any) -> VoteOutcome | None:
        """Clear the voter's vote, ignoring a missing vote.

        Returns:
            Outcome of the transition, None if there was no vote
        """
        try:
            return await self.unvote(voter, voteable)
        except NotVotedError:
            return None

    async def vote_state(self, voter: Any, voteable: Any) -> VoteState:
        """Get the state of the (voter, voteable) pair."""
        self.check_voteable(voteable)
        async with self.unit_of_work.transaction() as tx:
            voting = await tx.votings.find(
                ParticipantRef.of(voter), ParticipantRef.of(voteable)
            )
        return VoteState.of(voting)

    async def voted(self, voter: Any, voteable: Any) -> bool:
        """Whether the voter voted on the voteable in either direction."""
        return await self.vote_state(voter, voteable) is not VoteState.NONE

    async def up_voted(self, voter: Any, voteable: Any) -> bool:
        """Whether the voter up voted the voteable."""
        return await self.vote_state(voter, voteable) is VoteState.UP

    async def down_voted(self, voter: Any, voteable: Any) -> bool:
        """Whether the voter down voted the voteable."""
        return await self.vote_state(voter, voteable) is VoteState.DOWN

    async def vote_states(
        self, voter: Any, voteables: Sequence[Any]
    ) -> dict[ParticipantRef, VoteState]:
        """Get the voter's state on several voteables at once.

        Args:
            voter: The voting participant
            voteables: Voteables to check

        Returns:
            Dictionary mapping each voteable's reference to the pair's state
        """
        for voteable in voteables:
            self.check_voteable(voteable)

        refs = [ParticipantRef.of(voteable) for voteable in voteables]
        if not refs:
            return {}

        # Batch query to fetch all votings at once (avoid N+1)
        async with self.unit_of_work.transaction() as tx:
            votings = await tx.votings.find_by_voter_and_voteables(
                ParticipantRef.of(voter), refs
            )

        by_voteable = {voting.voteable: voting for voting in votings}
        return {ref: VoteState.of(by_voteable.get(ref)) for ref in refs}

    async def votings_by(self, voter: Any) -> list[Voting]:
        """List every voting cast by a voter."""
        async with self.unit_of_work.transaction() as tx:
            return await tx.votings.find_by_voter(ParticipantRef.of(voter))

    async def votings_on(self, voteable: Any) -> list[Voting]:
        """List every voting on a voteable."""
        self.check_voteable(voteable)
        async with self.unit_of_work.transaction() as tx:
            return await tx.votings.find_by_voteable(ParticipantRef.of(voteable))

    async def counts(self, participant: Any) -> VoteCounts:
        """Read a participant's stored up/down counts."""
        async with self.unit_of_work.transaction() as tx:
            return await tx.counters.get(ParticipantRef.of(participant))

    async def _transition(
        self, action: VoteAction, voter: Any, voteable: Any
    ) -> VoteOutcome:
        self.check_voteable(voteable)
        voter_ref = ParticipantRef.of(voter)
        voteable_ref = ParticipantRef.of(voteable)

        with logfire.span(
            action.value, voter=str(voter_ref), voteable=str(voteable_ref)
        ):
            attempt = 0
            while True:
                try:
                    return await self._commit(action, voter, voteable)
                except DuplicateEntryError:
                    # Lost an insert race on this pair; replay against fresh state
                    attempt += 1
                    if attempt > self.settings.conflict_retries:
                        logfire.warn(
                            "Voting conflict retries exhausted",
                            voter=str(voter_ref),
                            voteable=str(voteable_ref),
                            attempts=attempt,
                        )
                        raise
                    logfire.warn(
                        "Voting conflict, retrying",
                        voter=str(voter_ref),
                        voteable=str(voteable_ref),
                        attempt=attempt,
                    )
                except (AlreadyVotedError, NotVotedError) as e:
                    logfire.info(
                        "Vote transition rejected",
                        action=action.value,
                        voter=str(voter_ref),
                        voteable=str(voteable_ref),
                        reason=str(e),
                    )
                    raise

    async def _commit(
        self, action: VoteAction, voter: Any, voteable: Any
    ) -> VoteOutcome:
        voter_ref = ParticipantRef.of(voter)
        voteable_ref = ParticipantRef.of(voteable)

        async with self.unit_of_work.transaction() as tx:
            voting = await tx.votings.find(voter_ref, voteable_ref, for_update=True)
            transition = plan_transition(action, VoteState.of(voting))

            if transition.ledger_action is LedgerAction.CREATE:
                voting = await tx.votings.create(
                    voter_ref, voteable_ref, transition.direction
                )
            elif transition.ledger_action is LedgerAction.UPDATE:
                voting = await tx.votings.update_direction(
                    voting, transition.direction
                )
            else:
                await tx.votings.delete(voting)
                voting = None

            counted = [voteable_ref]
            if has_voter_counters(type(voter)):
                counted.append(voter_ref)

            # Counter rows are locked in (type, id) order so that two voters
            # voting on each other cannot deadlock
            counts: dict[ParticipantRef, VoteCounts] = {}
            for ref in sorted(counted, key=lambda r: (r.type, r.id)):
                counts[ref] = await tx.counters.apply(ref, transition.delta)

            voteable_counts = counts[voteable_ref]
            voter_counts = counts.get(voter_ref)

        logfire.info(
            "Vote transition committed",
            action=action.value,
            voter=str(voter_ref),
            voteable=str(voteable_ref),
            previous=transition.previous.value,
            target=transition.target.value,
        )

        return VoteOutcome(
            transition=transition,
            voting=voting,
            voter=_with_counts(voter, voter_counts),
            voteable=_with_counts(voteable, voteable_counts),
        )
