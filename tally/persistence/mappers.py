"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tally.domain.model import Voting
from tally.domain.value import ParticipantRef, VoteCounts, VoteDirection, VotingId


def row_to_voting(row: Dict[str, Any]) -> Voting:
    """Convert database row to Voting domain model.

    A row without a direction fails validation rather than reading as
    "no vote".

    Args:
        row: Database row as dict

    Returns:
        Voting domain model
    """
    return Voting(
        id=VotingId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        voter=ParticipantRef(type=row["voter_type"], id=row["voter_id"]),
        voteable=ParticipantRef(type=row["voteable_type"], id=row["voteable_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def voting_to_dict(voting: Voting) -> Dict[str, Any]:
    """Convert Voting domain model to database dict.

    Timestamps are left to the database defaults.

    Args:
        voting: Voting domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": voting.id,
        "voter_type": voting.voter.type,
        "voter_id": voting.voter.id,
        "voteable_type": voting.voteable.type,
        "voteable_id": voting.voteable.id,
        "direction": voting.direction.value,
    }


def row_to_counts(row: Dict[str, Any]) -> VoteCounts:
    """Convert a counter row to VoteCounts.

    Args:
        row: Database row as dict with up_votes and down_votes keys

    Returns:
        VoteCounts value object
    """
    return VoteCounts(up_votes=row["up_votes"], down_votes=row["down_votes"])
