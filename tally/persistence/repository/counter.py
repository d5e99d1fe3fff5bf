"""PostgreSQL implementation of Counter repository."""

from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.error import NotFoundError
from tally.domain.repository import CounterRepository
from tally.domain.value import CounterDelta, ParticipantRef, VoteCounts
from tally.persistence.counters import CounterTables
from tally.persistence.mappers import row_to_counts
from tally.persistence.tables import vote_counters_table


class PostgresCounterRepository(CounterRepository):
    """PostgreSQL implementation of CounterRepository.

    Counters of registered participant types are updated in place on the
    host's table. All other types use the ``vote_counters`` table.
    """

    def __init__(self, session: AsyncSession, counter_tables: CounterTables) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            counter_tables: Host tables holding participants' counters
        """
        self.session = session
        self.counter_tables = counter_tables

    async def get(self, participant: ParticipantRef) -> VoteCounts:
        """Read a participant's stored counts."""
        counter_table = self.counter_tables.get(participant.type)
        if counter_table is not None:
            stmt = select(
                counter_table.up_votes.label("up_votes"),
                counter_table.down_votes.label("down_votes"),
            ).where(counter_table.id == counter_table.key(participant.id))
        else:
            stmt = select(
                vote_counters_table.c.up_votes, vote_counters_table.c.down_votes
            ).where(
                and_(
                    vote_counters_table.c.participant_type == participant.type,
                    vote_counters_table.c.participant_id == participant.id,
                )
            )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_counts(row._asdict()) if row else VoteCounts()

    async def apply(
        self, participant: ParticipantRef, delta: CounterDelta
    ) -> VoteCounts:
        """Atomically add a delta to a participant's counts."""
        counter_table = self.counter_tables.get(participant.type)
        if counter_table is None:
            return await self._upsert(participant, delta)

        stmt = (
            update(counter_table.table)
            .where(counter_table.id == counter_table.key(participant.id))
            .values(
                {
                    counter_table.up_votes: counter_table.up_votes + delta.up,
                    counter_table.down_votes: counter_table.down_votes + delta.down,
                }
            )
            .returning(
                counter_table.up_votes.label("up_votes"),
                counter_table.down_votes.label("down_votes"),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError(participant.type, participant.id)
        return row_to_counts(row._asdict())

    async def _upsert(
        self, participant: ParticipantRef, delta: CounterDelta
    ) -> VoteCounts:
        stmt = pg_insert(vote_counters_table).values(
            participant_type=participant.type,
            participant_id=participant.id,
            up_votes=delta.up,
            down_votes=delta.down,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                vote_counters_table.c.participant_type,
                vote_counters_table.c.participant_id,
            ],
            set_={
                "up_votes": vote_counters_table.c.up_votes + stmt.excluded.up_votes,
                "down_votes": vote_counters_table.c.down_votes
                + stmt.excluded.down_votes,
            },
        ).returning(vote_counters_table.c.up_votes, vote_counters_table.c.down_votes)
        result = await self.session.execute(stmt)
        return row_to_counts(result.one()._asdict())
