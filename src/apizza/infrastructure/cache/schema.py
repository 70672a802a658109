"""SQLAlchemy Core table definitions for the apizza cache."""

from __future__ import annotations

from sqlalchemy import Column, LargeBinary, MetaData, Table, Text

metadata = MetaData()

cache_entries = Table(
    "cache",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", LargeBinary, nullable=False),
    Column("updated", Text, nullable=False),  # ISO-8601 UTC
)
