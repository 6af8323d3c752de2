from typing import Dict, List, Optional

from app.models.db_models import BookingRecord
from app.storage.base import KeyValueStore

class InMemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed collection, iterated in ascending key order.
    Records go in and come out as copies so callers never share state with the store.
    """

    def __init__(self):
        self._data: Dict[str, BookingRecord] = {}

    def get(self, key: str) -> Optional[BookingRecord]:
        record = self._data.get(key)
        return record.model_copy() if record else None

    def insert(self, key: str, record: BookingRecord) -> Optional[BookingRecord]:
        previous = self._data.get(key)
        self._data[key] = record.model_copy()
        return previous

    def remove(self, key: str) -> Optional[BookingRecord]:
        return self._data.pop(key, None)

    def values(self) -> List[BookingRecord]:
        return [self._data[key].model_copy() for key in sorted(self._data)]

    def count(self) -> int:
        return len(self._data)
