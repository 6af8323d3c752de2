from typing import Optional

from pydantic import ValidationError

from app.core.config import settings
from app.core.config_loader import load_seed_bookings
from app.core.logger import logger
from app.models.db_models import BookingInput
from app.services.booking_service import BookingStore
from app.storage.factory import build_key_value_store

_store: Optional[BookingStore] = None

def get_booking_store() -> BookingStore:
    """FastAPI dependency: the process-wide BookingStore, built on first use."""
    global _store
    if _store is None:
        _store = BookingStore(build_key_value_store(settings))
    return _store

def set_booking_store(store: Optional[BookingStore]):
    global _store
    _store = store

def seed_store(store: BookingStore, path: str) -> int:
    """
    Adds every booking from the seed file through the normal validation path.
    Only an empty collection is seeded, so restarts on a durable backend add nothing.
    Returns the number of bookings added.
    """
    count = store.count_all()
    if not count.is_ok:
        logger.error(f"❌ Seeding skipped, could not count bookings: {count.error.message}")
        return 0
    if count.value > 0:
        logger.info(f"🌱 Seeding skipped, store already holds {count.value} bookings")
        return 0

    added = 0
    for index, entry in enumerate(load_seed_bookings(path)):
        try:
            payload = BookingInput.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"⚠️ Seed entry #{index} skipped (schema): {e.error_count()} error(s)")
            continue

        result = store.add(payload)
        if result.is_ok:
            added += 1
        else:
            logger.warning(f"⚠️ Seed entry #{index} skipped: {result.error.message}")

    logger.info(f"🌱 Seeded {added} bookings from {path}")
    return added
