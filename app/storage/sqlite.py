import sqlite3
from typing import List, Optional

from app.core.logger import logger
from app.models.db_models import BookingRecord
from app.storage.base import KeyValueStore, StorageError

class SqliteKeyValueStore(KeyValueStore):
    """
    Durable backend: one row per booking, the record itself kept as JSON.
    """

    def __init__(self, db_file: str):
        self.db_file = db_file
        self._initialize()

    def _connect(self):
        return sqlite3.connect(self.db_file)

    def _execute(self, sql: str, params: tuple = ()) -> list:
        conn = None
        try:
            conn = self._connect()
            with conn:
                rows = conn.execute(sql, params).fetchall()
            return rows
        except sqlite3.Error as e:
            logger.error(f"❌ SQLite error ({self.db_file}): {e}")
            raise StorageError(str(e)) from e
        finally:
            if conn is not None:
                conn.close()

    def _initialize(self):
        self._execute(
            "CREATE TABLE IF NOT EXISTS car_bookings (id TEXT PRIMARY KEY, payload TEXT NOT NULL)"
        )
        logger.info(f"✅ SQLite storage ready: {self.db_file}")

    @staticmethod
    def _load(payload: str) -> BookingRecord:
        return BookingRecord.model_validate_json(payload)

    def get(self, key: str) -> Optional[BookingRecord]:
        rows = self._execute("SELECT payload FROM car_bookings WHERE id = ?", (key,))
        return self._load(rows[0][0]) if rows else None

    def insert(self, key: str, record: BookingRecord) -> Optional[BookingRecord]:
        previous = self.get(key)
        self._execute(
            "INSERT OR REPLACE INTO car_bookings (id, payload) VALUES (?, ?)",
            (key, record.model_dump_json()),
        )
        return previous

    def remove(self, key: str) -> Optional[BookingRecord]:
        previous = self.get(key)
        if previous is not None:
            self._execute("DELETE FROM car_bookings WHERE id = ?", (key,))
        return previous

    def values(self) -> List[BookingRecord]:
        rows = self._execute("SELECT payload FROM car_bookings ORDER BY id")
        return [self._load(row[0]) for row in rows]

    def count(self) -> int:
        rows = self._execute("SELECT COUNT(*) FROM car_bookings")
        return rows[0][0]
