"""DataBase — key/value cache handle handed out by :meth:`Builder.db`.

Every entry carries an ``updated`` timestamp so callers can decide when
cached data has gone stale (see :meth:`DataBase.expired`).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.sqlite import insert

from apizza.infrastructure.cache.engine import init_database
from apizza.infrastructure.cache.schema import cache_entries

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


class DataBase:
    """Persistent byte-valued cache backed by SQLite."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def put(self, key: str, value: bytes) -> None:
        """Store *value* under *key*, replacing any previous entry."""
        stamp = _now().isoformat()
        stmt = insert(cache_entries).values(key=key, value=value, updated=stamp)
        stmt = stmt.on_conflict_do_update(
            index_elements=[cache_entries.c.key],
            set_={"value": stmt.excluded.value, "updated": stmt.excluded.updated},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def get(self, key: str) -> bytes | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(cache_entries.c.value).where(cache_entries.c.key == key)
            ).first()
        return None if row is None else bytes(row.value)

    def exists(self, key: str) -> bool:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(cache_entries.c.key).where(cache_entries.c.key == key)
            ).first()
        return row is not None

    def delete(self, key: str) -> None:
        """Remove *key*. Missing keys are ignored."""
        with self._engine.begin() as conn:
            conn.execute(delete(cache_entries).where(cache_entries.c.key == key))

    def keys(self) -> list[str]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(cache_entries.c.key).order_by(cache_entries.c.key))
            return [row.key for row in rows]

    def timestamp(self, key: str) -> datetime | None:
        """Return when *key* was last written, or None if it is not cached."""
        with self._engine.connect() as conn:
            row = conn.execute(
                select(cache_entries.c.updated).where(cache_entries.c.key == key)
            ).first()
        return None if row is None else datetime.fromisoformat(row.updated)

    def update_ts(self, key: str) -> None:
        """Mark *key* as freshly written without changing its value."""
        with self._engine.begin() as conn:
            conn.execute(
                update(cache_entries)
                .where(cache_entries.c.key == key)
                .values(updated=_now().isoformat())
            )

    def expired(self, key: str, ttl: timedelta) -> bool:
        """Whether *key* is older than *ttl*. Missing keys count as expired."""
        stamp = self.timestamp(key)
        if stamp is None:
            return True
        return _now() - stamp > ttl

    def clear(self) -> int:
        """Delete every entry and return how many were removed."""
        with self._engine.begin() as conn:
            result = conn.execute(delete(cache_entries))
        logger.debug("Cleared %d cache entries", result.rowcount)
        return result.rowcount

    def close(self) -> None:
        self._engine.dispose()


def open_database(db_path: Path) -> DataBase:
    """Open (creating if needed) the cache at *db_path*."""
    logger.debug("Opening cache at %s", db_path)
    return DataBase(init_database(db_path))
