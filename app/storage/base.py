from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.db_models import BookingRecord

class StorageError(Exception):
    """Raised by a backend when it could not complete an operation."""
    pass

class KeyValueStore(ABC):
    """
    Ordered key -> BookingRecord collection backing the BookingStore.
    Implementations raise StorageError for any internal failure.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[BookingRecord]:
        raise NotImplementedError

    @abstractmethod
    def insert(self, key: str, record: BookingRecord) -> Optional[BookingRecord]:
        """Stores record under key, returns the previous value (or None)."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> Optional[BookingRecord]:
        raise NotImplementedError

    @abstractmethod
    def values(self) -> List[BookingRecord]:
        """All records in ascending key order."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
