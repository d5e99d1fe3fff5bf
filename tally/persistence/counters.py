"""Counter table registry.

Host applications usually keep ``up_votes`` / ``down_votes`` as columns on
their own tables. Registering such a table for a participant type makes the
counter repository update those columns in place:

    counter_tables = CounterTables()
    counter_tables.register(Post, posts_table)
    counter_tables.register("User", users_table, id_column="user_id")

Participant types without a registered table keep their counters in the
built-in ``vote_counters`` table.
"""

from dataclasses import dataclass
import logging
from typing import Any

from sqlalchemy import Column, Table

from tally.util.error import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CounterTable:
    """Where a participant type's counters live."""

    table: Table
    id_column: str = "id"
    up_column: str = "up_votes"
    down_column: str = "down_votes"

    @property
    def id(self) -> Column:
        return self.table.c[self.id_column]

    @property
    def up_votes(self) -> Column:
        return self.table.c[self.up_column]

    @property
    def down_votes(self) -> Column:
        return self.table.c[self.down_column]

    def key(self, participant_id: str) -> Any:
        """Convert a stored participant id back to the id column's type."""
        try:
            python_type = self.id.type.python_type
        except NotImplementedError:
            return participant_id
        if python_type is str:
            return participant_id
        return python_type(participant_id)


class CounterTables:
    """Registry mapping participant types to host counter tables."""

    def __init__(self) -> None:
        self._tables: dict[str, CounterTable] = {}

    def register(
        self,
        participant_type: str | type,
        table: Table,
        *,
        id_column: str = "id",
        up_column: str = "up_votes",
        down_column: str = "down_votes",
    ) -> CounterTable:
        """Register the table holding a participant type's counters.

        Args:
            participant_type: Type tag, or the participant class itself
            table: Host table with id and counter columns
            id_column: Name of the identity column
            up_column: Name of the up votes column
            down_column: Name of the down votes column

        Returns:
            The registered counter table

        Raises:
            ConfigurationError: If the type is already registered or a column is missing
        """
        if isinstance(participant_type, str):
            type_name = participant_type
        elif hasattr(participant_type, "participant_type"):
            type_name = participant_type.participant_type()
        else:
            type_name = participant_type.__name__

        if type_name in self._tables:
            raise ConfigurationError(f"Counter table already registered for {type_name}")

        missing = [
            name for name in (id_column, up_column, down_column) if name not in table.c
        ]
        if missing:
            raise ConfigurationError(
                f"Table {table.name} is missing counter columns: {', '.join(missing)}"
            )

        counter_table = CounterTable(
            table=table,
            id_column=id_column,
            up_column=up_column,
            down_column=down_column,
        )
        self._tables[type_name] = counter_table
        logger.info(f"Registered counter table {table.name} for {type_name}")
        return counter_table

    def get(self, participant_type: str) -> CounterTable | None:
        """Get the counter table registered for a type, if any."""
        return self._tables.get(participant_type)

    def __contains__(self, participant_type: str) -> bool:
        return participant_type in self._tables
