"""Domain value objects for tally.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any

from pydantic import field_validator

from tally.domain.value.common import ValueObject


class VoteDirection(str, Enum):
    """Direction of a recorded vote."""

    UP = "up"
    DOWN = "down"

    @property
    def is_up(self) -> bool:
        return self is VoteDirection.UP


class VoteState(str, Enum):
    """State of a (voter, voteable) pair.

    NONE is never stored: it is the absence of a ledger entry.
    """

    NONE = "none"
    UP = "up"
    DOWN = "down"

    @classmethod
    def of(cls, voting: Any) -> "VoteState":
        """Resolve the state from a ledger entry (or its absence)."""
        if voting is None:
            return cls.NONE
        return cls.UP if voting.up_vote else cls.DOWN


class VoteAction(str, Enum):
    """Operations that move a pair through the vote state machine."""

    UP_VOTE = "up_vote"
    DOWN_VOTE = "down_vote"
    UNVOTE = "unvote"


class LedgerAction(str, Enum):
    """Write applied to the ledger by a transition."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ParticipantRef(ValueObject):
    """Polymorphic identity of a voter or voteable.

    Pairs a type tag with the host's identifier. The identifier is kept in its
    string form so that UUID, integer and string keys share one ledger column.
    """

    type: str
    id: str

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate the type tag is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Participant type must be 1-255 characters")
        return v

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Store any opaque identifier as a string."""
        if v is None:
            raise ValueError("Participant id is required")
        return str(v)

    @classmethod
    def of(cls, participant: Any) -> "ParticipantRef":
        """Build a reference from a participant instance."""
        participant_type = getattr(participant, "participant_type", None)
        type_name = (
            participant_type() if callable(participant_type) else type(participant).__name__
        )
        return cls(type=type_name, id=participant.id)

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


class CounterDelta(ValueObject):
    """Change applied to a participant's up/down aggregates."""

    up: int = 0
    down: int = 0


class VoteCounts(ValueObject):
    """Stored up/down aggregates of a participant."""

    up_votes: int = 0
    down_votes: int = 0

    @property
    def score(self) -> int:
        """Net votes (up minus down)."""
        return self.up_votes - self.down_votes

    @property
    def total_votes(self) -> int:
        return self.up_votes + self.down_votes

    def apply(self, delta: CounterDelta) -> "VoteCounts":
        """Return the counts after adding a delta."""
        return VoteCounts(
            up_votes=self.up_votes + delta.up,
            down_votes=self.down_votes + delta.down,
        )


class Transition(ValueObject):
    """A planned move of a (voter, voteable) pair between vote states.

    The same delta applies to the voteable and, when it carries counters,
    to the voter.
    """

    action: VoteAction
    previous: VoteState
    target: VoteState
    ledger_action: LedgerAction
    delta: CounterDelta

    @property
    def direction(self) -> VoteDirection | None:
        """Direction written to the ledger, None when the entry is deleted."""
        if self.target is VoteState.NONE:
            return None
        return VoteDirection(self.target.value)
