"""Domain value objects for tally."""

from tally.domain.value.identifiers import ParticipantId, VotingId
from tally.domain.value.types import (
    CounterDelta,
    LedgerAction,
    ParticipantRef,
    Transition,
    VoteAction,
    VoteCounts,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "ParticipantId",
    "VotingId",
    # Types
    "CounterDelta",
    "LedgerAction",
    "ParticipantRef",
    "Transition",
    "VoteAction",
    "VoteCounts",
    "VoteDirection",
    "VoteState",
]
