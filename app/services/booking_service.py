import threading
import time
import uuid
from functools import wraps
from typing import Callable, List, Optional

from app.core.logger import logger
from app.models.db_models import BookingInput, BookingRecord
from app.models.result import (
    BookingListResult,
    BookingResult,
    CountResult,
    ErrorKind,
    err,
    ok,
)
from app.storage.base import KeyValueStore, StorageError

MISSING_FIELDS_MESSAGE = "Invalid input. Please provide all required fields."
NEGATIVE_VALUE_MESSAGE = "Invalid input. Dates and price must not be negative."
DATE_ORDER_MESSAGE = "End date must be after the start date."

def now_ns() -> int:
    return time.time_ns()

def new_booking_id() -> str:
    return str(uuid.uuid4())

def validate_booking_input(payload: BookingInput) -> Optional[str]:
    """
    Returns the message of the first failed rule, or None if the payload is valid.
    Required fields are checked first, then signs, then the date order.
    """
    if (
        not payload.car_model
        or not payload.location
        or not payload.user_id
        or payload.start_date is None
        or payload.end_date is None
        or payload.price is None
        or payload.is_paid is None
    ):
        return MISSING_FIELDS_MESSAGE

    if payload.start_date < 0 or payload.end_date < 0 or payload.price < 0:
        return NEGATIVE_VALUE_MESSAGE

    if payload.start_date >= payload.end_date:
        return DATE_ORDER_MESSAGE

    return None

def _storage_guard(context: str):
    """Turns a StorageError raised by the collaborator into a StorageFault result."""
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            with self._lock:
                try:
                    return func(self, *args, **kwargs)
                except StorageError as e:
                    logger.error(f"❌ {context}: {e}")
                    return err(ErrorKind.STORAGE_FAULT, f"{context}: {e}")
        return wrapper
    return decorator

class BookingStore:
    """
    Keyed collection of car bookings with validated mutation and read-only filters.
    Every public method returns a tagged result (Ok / Err) instead of raising.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        clock: Callable[[], int] = now_ns,
        id_generator: Callable[[], str] = new_booking_id,
    ):
        self.storage = storage
        self.clock = clock
        self.id_generator = id_generator
        # One operation in flight per store, the API runs store calls on worker threads
        self._lock = threading.RLock()

    # --- CRUD ---

    @_storage_guard("Error getting car bookings")
    def list_all(self) -> BookingListResult:
        return ok(self.storage.values())

    @_storage_guard("Error getting car booking")
    def get_by_id(self, booking_id: str) -> BookingResult:
        record = self.storage.get(booking_id)
        if record is None:
            return err(ErrorKind.NOT_FOUND, f"A car booking with id={booking_id} not found")
        return ok(record)

    @_storage_guard("Error adding car booking")
    def add(self, payload: BookingInput) -> BookingResult:
        problem = validate_booking_input(payload)
        if problem:
            logger.warning(f"⚠️ Rejected new booking: {problem}")
            return err(ErrorKind.VALIDATION, problem)

        record = BookingRecord(
            id=self.id_generator(),
            created_at=self.clock(),
            updated_at=None,
            **payload.model_dump(),
        )
        self.storage.insert(record.id, record)
        logger.info(f"🆕 Booking {record.id} created ({record.car_model}, user {record.user_id})")
        return ok(record)

    @_storage_guard("Error updating car booking")
    def update(self, booking_id: str, payload: BookingInput) -> BookingResult:
        problem = validate_booking_input(payload)
        if problem:
            logger.warning(f"⚠️ Rejected update of booking {booking_id}: {problem}")
            return err(ErrorKind.VALIDATION, problem)

        current = self.storage.get(booking_id)
        if current is None:
            logger.warning(f"⚠️ Update of unknown booking {booking_id}")
            return err(
                ErrorKind.NOT_FOUND,
                f"Couldn't update a car booking with id={booking_id}. Car booking not found",
            )

        # updatedAt never goes backwards, even if the clock does
        last_change = current.updated_at if current.updated_at is not None else current.created_at
        updated = BookingRecord(
            id=current.id,
            created_at=current.created_at,
            updated_at=max(self.clock(), last_change),
            **payload.model_dump(),
        )
        self.storage.insert(current.id, updated)
        logger.info(f"✏️ Booking {booking_id} updated")
        return ok(updated)

    @_storage_guard("Error deleting car booking")
    def delete(self, booking_id: str) -> BookingResult:
        removed = self.storage.remove(booking_id)
        if removed is None:
            logger.warning(f"⚠️ Delete of unknown booking {booking_id}")
            return err(
                ErrorKind.NOT_FOUND,
                f"Couldn't delete a car booking with id={booking_id}. Car booking not found.",
            )
        logger.info(f"🗑️ Booking {booking_id} deleted")
        return ok(removed)

    # --- Queries ---

    def _filter(self, predicate: Callable[[BookingRecord], bool]) -> List[BookingRecord]:
        return [booking for booking in self.storage.values() if predicate(booking)]

    @_storage_guard("Error searching car bookings")
    def search(self, keyword: str) -> BookingListResult:
        needle = keyword.lower()
        return ok(self._filter(lambda b: needle in b.car_model.lower()))

    @_storage_guard("Error counting car bookings")
    def count_all(self) -> CountResult:
        return ok(self.storage.count())

    @_storage_guard("Error getting paginated car bookings")
    def paginate(self, page: int, page_size: int) -> BookingListResult:
        if page <= 0 or page_size <= 0:
            return ok([])
        start = (page - 1) * page_size
        return ok(self.storage.values()[start:start + page_size])

    @_storage_guard("Error getting car bookings by time range")
    def by_time_range(self, start_time: int, end_time: int) -> BookingListResult:
        # Containment, not overlap: the whole booking must fit in the window
        return ok(self._filter(lambda b: b.start_date >= start_time and b.end_date <= end_time))

    @_storage_guard("Error getting car bookings by start date")
    def by_start_date(self, start_date: int) -> BookingListResult:
        return ok(self._filter(lambda b: b.start_date == start_date))

    @_storage_guard("Error getting car bookings by end date")
    def by_end_date(self, end_date: int) -> BookingListResult:
        return ok(self._filter(lambda b: b.end_date == end_date))

    @_storage_guard("Error getting car bookings by car model")
    def by_car_model(self, car_model: str) -> BookingListResult:
        wanted = car_model.lower()
        return ok(self._filter(lambda b: b.car_model.lower() == wanted))
