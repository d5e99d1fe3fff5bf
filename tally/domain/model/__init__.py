"""Domain model entities for tally."""

from tally.domain.model.participant import (
    Participant,
    VoteCounters,
    Voteable,
    Voter,
    has_voter_counters,
    is_voteable,
    is_voter,
)
from tally.domain.model.voting import VoteOutcome, Voting

__all__ = [
    "Participant",
    "VoteCounters",
    "VoteOutcome",
    "Voteable",
    "Voter",
    "Voting",
    "has_voter_counters",
    "is_voteable",
    "is_voter",
]
