"""Participant models.

Voters and voteables are owned by the host application. tally only needs
their identity, their class-level capability markers and, where present,
their up/down counters. Host models subclass ``Voteable`` / ``Voter``:

    class Post(Voteable):
        title: str

    class User(Voter, VoteCounters):
        handle: str

A voter that mixes in ``VoteCounters`` gets voter-side aggregates; one that
doesn't is simply skipped when counters are applied.
"""

from functools import cache
from typing import Any, ClassVar

from tally.domain.model.common import DomainModel
from tally.domain.value import ParticipantId, ParticipantRef, VoteCounts


class Participant(DomainModel):
    """Anything that can take part in a vote, identified by (type, id)."""

    # Overrides the class name as the ledger's type tag
    __participant_type__: ClassVar[str | None] = None

    id: ParticipantId

    @classmethod
    def participant_type(cls) -> str:
        return cls.__participant_type__ or cls.__name__

    @property
    def ref(self) -> ParticipantRef:
        return ParticipantRef(type=self.participant_type(), id=self.id)


class VoteCounters(DomainModel):
    """Cached up/down aggregates carried by a participant."""

    up_votes: int = 0
    down_votes: int = 0

    @property
    def score(self) -> int:
        """Net votes (up minus down)."""
        return self.up_votes - self.down_votes

    @property
    def total_votes(self) -> int:
        return self.up_votes + self.down_votes

    def with_counts(self, counts: VoteCounts) -> "VoteCounters":
        """Return a copy carrying the given stored counts."""
        return self.model_copy(
            update={"up_votes": counts.up_votes, "down_votes": counts.down_votes}
        )


class Voteable(Participant, VoteCounters):
    """An entity that can be voted on.

    Set ``__voteable__ = False`` on a subclass to withdraw eligibility.
    """

    __voteable__: ClassVar[bool] = True


class Voter(Participant):
    """An entity that casts votes."""

    __voter__: ClassVar[bool] = True


def is_voteable(obj: Any) -> bool:
    """Whether the object's class declares voting eligibility."""
    return bool(getattr(type(obj), "__voteable__", False))


def is_voter(obj: Any) -> bool:
    """Whether the object's class declares itself a voter."""
    return bool(getattr(type(obj), "__voter__", False))


@cache
def has_voter_counters(voter_type: type) -> bool:
    """Whether a voter class carries up/down counters.

    Resolved once per class; the answer never changes for a given type.
    """
    return isinstance(voter_type, type) and issubclass(voter_type, VoteCounters)
