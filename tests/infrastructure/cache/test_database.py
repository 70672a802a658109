"""Tests for the DataBase key/value cache."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

from apizza.infrastructure.cache import DataBase, open_database


class TestPutGet:
    def test_roundtrip(self, db: DataBase) -> None:
        db.put("menu", b'{"pizzas": 12}')
        assert db.get("menu") == b'{"pizzas": 12}'

    def test_missing_key(self, db: DataBase) -> None:
        assert db.get("menu") is None
        assert db.exists("menu") is False

    def test_overwrite(self, db: DataBase) -> None:
        db.put("menu", b"old")
        db.put("menu", b"new")
        assert db.get("menu") == b"new"
        assert db.keys() == ["menu"]

    def test_persists_across_handles(self, tmp_path: Path) -> None:
        path = tmp_path / "apizza.db"
        first = open_database(path)
        first.put("store", b"4336")
        first.close()
        second = open_database(path)
        assert second.get("store") == b"4336"
        second.close()


class TestKeysAndDelete:
    def test_keys_sorted(self, db: DataBase) -> None:
        for key in ("store", "menu", "address"):
            db.put(key, b"x")
        assert db.keys() == ["address", "menu", "store"]

    def test_delete(self, db: DataBase) -> None:
        db.put("menu", b"x")
        db.delete("menu")
        assert db.exists("menu") is False

    def test_delete_missing_is_noop(self, db: DataBase) -> None:
        db.delete("menu")

    def test_clear(self, db: DataBase) -> None:
        db.put("a", b"1")
        db.put("b", b"2")
        assert db.clear() == 2
        assert db.keys() == []


class TestTimestamps:
    def test_timestamp_set_on_put(self, db: DataBase) -> None:
        before = datetime.now(UTC)
        db.put("menu", b"x")
        stamp = db.timestamp("menu")
        assert stamp is not None
        assert before <= stamp <= datetime.now(UTC)

    def test_timestamp_missing(self, db: DataBase) -> None:
        assert db.timestamp("menu") is None

    def test_update_ts(self, db: DataBase) -> None:
        db.put("menu", b"x")
        first = db.timestamp("menu")
        db.update_ts("menu")
        second = db.timestamp("menu")
        assert first is not None and second is not None
        assert second >= first
        assert db.get("menu") == b"x"

    def test_expired(self, db: DataBase) -> None:
        db.put("menu", b"x")
        assert db.expired("menu", timedelta(hours=1)) is False
        assert db.expired("menu", timedelta(seconds=-1)) is True

    def test_missing_key_is_expired(self, db: DataBase) -> None:
        assert db.expired("menu", timedelta(days=1)) is True
