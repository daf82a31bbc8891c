"""SQLAlchemy table definitions for Feature Vote.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Largest id an INTEGER primary key can hold on every supported backend
FEATURE_ID_MAX = 2**31 - 1

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# FEATURES TABLE
# ============================================================================
features_table = Table(
    "features",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("votes >= 0", name="check_votes_non_negative"),
    CheckConstraint("length(title) >= 1", name="check_title_not_empty"),
)

Index("idx_features_votes", features_table.c.votes)
