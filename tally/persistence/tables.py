"""SQLAlchemy table definitions for tally.

The host application owns schema migrations; these definitions describe the
tables tally reads and writes and can be used with ``metadata.create_all``.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTINGS TABLE (ledger: one row per voter/voteable pair)
# ============================================================================
votings_table = Table(
    "votings",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("voter_type", String(255), nullable=False),
    Column("voter_id", String(255), nullable=False),
    Column("voteable_type", String(255), nullable=False),
    Column("voteable_id", String(255), nullable=False),
    Column("direction", String(4), nullable=False),  # 'up' or 'down'
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("direction IN ('up', 'down')", name="ck_votings_direction"),
    UniqueConstraint(
        "voter_type",
        "voter_id",
        "voteable_type",
        "voteable_id",
        name="uq_votings_voter_voteable",
    ),
)

Index(
    "idx_votings_voteable",
    votings_table.c.voteable_type,
    votings_table.c.voteable_id,
)
Index("idx_votings_voter", votings_table.c.voter_type, votings_table.c.voter_id)

# ============================================================================
# VOTE_COUNTERS TABLE (aggregates for participant types without their own table)
# ============================================================================
vote_counters_table = Table(
    "vote_counters",
    metadata,
    Column("participant_type", String(255), primary_key=True),
    Column("participant_id", String(255), primary_key=True),
    Column("up_votes", Integer, nullable=False, server_default="0"),
    Column("down_votes", Integer, nullable=False, server_default="0"),
)
