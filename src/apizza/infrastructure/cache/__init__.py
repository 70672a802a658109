"""SQLite-backed key/value cache via SQLAlchemy Core."""

from apizza.infrastructure.cache.database import DataBase, open_database

__all__ = ["DataBase", "open_database"]
