"""Voting entity.

A voting is the ledger entry recording one voter's stance on one voteable.
Each voter holds at most one voting per voteable; having no vote is the
absence of an entry, never a neutral row.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.value import ParticipantRef, Transition, VoteDirection, VotingId


class Voting(DomainModel):
    """Voting entity.

    Business rules:
    - One voting per (voter, voteable) pair (enforced by database unique constraint)
    - Direction is always concrete (up or down)
    - Polymorphic references to both voter and voteable
    """

    id: VotingId
    voter: ParticipantRef
    voteable: ParticipantRef
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def up_vote(self) -> bool:
        return self.direction is VoteDirection.UP


class VoteOutcome(DomainModel):
    """Result of a committed vote transition.

    ``voter`` and ``voteable`` are copies of the participants carrying the
    counter values read back from storage after the atomic update.
    """

    transition: Transition
    voting: Voting | None
    voter: Any
    voteable: Any
