"""SQLAlchemy table definitions.

These match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Integer, MetaData, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BAZ TABLE
# ============================================================================
baz_table = Table(
    "baz",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("baz_data", Text, nullable=True),
    # SQLite only: never hand out the id of a deleted row again
    sqlite_autoincrement=True,
)
