"""Strongly typed identifiers for tally domain entities.

Participant identifiers are opaque: the host application decides whether its
voters and voteables are keyed by UUIDs, integers or strings.
"""

from typing import NewType, Union
from uuid import UUID

VotingId = NewType("VotingId", UUID)

# Host-owned identity of a voter or voteable
ParticipantId = Union[UUID, int, str]
