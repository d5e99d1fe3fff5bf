"""PostgreSQL implementation of Voting repository."""

from typing import List, Optional, Sequence
from uuid import uuid4

from sqlalchemy import and_, delete, func, insert, select, tuple_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.error import DuplicateEntryError
from tally.domain.model import Voting
from tally.domain.repository import VotingRepository
from tally.domain.value import ParticipantRef, VoteDirection, VotingId
from tally.persistence.mappers import row_to_voting, voting_to_dict
from tally.persistence.tables import votings_table


def _is_pair(voter: ParticipantRef, voteable: ParticipantRef):
    return and_(
        votings_table.c.voter_type == voter.type,
        votings_table.c.voter_id == voter.id,
        votings_table.c.voteable_type == voteable.type,
        votings_table.c.voteable_id == voteable.id,
    )


class PostgresVotingRepository(VotingRepository):
    """PostgreSQL implementation of VotingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        *,
        for_update: bool = False,
    ) -> Optional[Voting]:
        """Find the voting of a voter on a voteable."""
        stmt = select(votings_table).where(_is_pair(voter, voteable))
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_voting(row._asdict()) if row else None

    async def create(
        self,
        voter: ParticipantRef,
        voteable: ParticipantRef,
        direction: VoteDirection,
    ) -> Voting:
        """Create a voting (unique per voter/voteable pair)."""
        voting = Voting(
            id=VotingId(uuid4()),
            voter=voter,
            voteable=voteable,
            direction=direction,
        )
        stmt = (
            insert(votings_table)
            .values(**voting_to_dict(voting))
            .returning(*votings_table.c)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateEntryError(str(voter), str(voteable)) from e
        return row_to_voting(result.one()._asdict())

    async def update_direction(
        self, voting: Voting, direction: VoteDirection
    ) -> Voting:
        """Change the direction of an existing voting."""
        stmt = (
            update(votings_table)
            .where(votings_table.c.id == voting.id)
            .values(direction=direction.value, updated_at=func.now())
            .returning(*votings_table.c)
        )
        result = await self.session.execute(stmt)
        return row_to_voting(result.one()._asdict())

    async def delete(self, voting: Voting) -> None:
        """Delete a voting."""
        stmt = delete(votings_table).where(votings_table.c.id == voting.id)
        await self.session.execute(stmt)

    async def find_by_voter(self, voter: ParticipantRef) -> List[Voting]:
        """Find all votings cast by a voter."""
        stmt = (
            select(votings_table)
            .where(
                and_(
                    votings_table.c.voter_type == voter.type,
                    votings_table.c.voter_id == voter.id,
                )
            )
            .order_by(votings_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_voting(row._asdict()) for row in result.fetchall()]

    async def find_by_voteable(self, voteable: ParticipantRef) -> List[Voting]:
        """Find all votings on a voteable."""
        stmt = (
            select(votings_table)
            .where(
                and_(
                    votings_table.c.voteable_type == voteable.type,
                    votings_table.c.voteable_id == voteable.id,
                )
            )
            .order_by(votings_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_voting(row._asdict()) for row in result.fetchall()]

    async def find_by_voter_and_voteables(
        self,
        voter: ParticipantRef,
        voteables: Sequence[ParticipantRef],
    ) -> List[Voting]:
        """Find a voter's votings on multiple voteables (batch query)."""
        if not voteables:
            return []

        stmt = select(votings_table).where(
            and_(
                votings_table.c.voter_type == voter.type,
                votings_table.c.voter_id == voter.id,
                tuple_(
                    votings_table.c.voteable_type, votings_table.c.voteable_id
                ).in_([(ref.type, ref.id) for ref in voteables]),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_voting(row._asdict()) for row in result.fetchall()]

    async def count_by_voteable(
        self,
        voteable: ParticipantRef,
        direction: Optional[VoteDirection] = None,
    ) -> int:
        """Count votings on a voteable."""
        conditions = [
            votings_table.c.voteable_type == voteable.type,
            votings_table.c.voteable_id == voteable.id,
        ]
        if direction is not None:
            conditions.append(votings_table.c.direction == direction.value)

        stmt = select(func.count()).select_from(votings_table).where(and_(*conditions))
        result = await self.session.execute(stmt)
        return result.scalar_one()
