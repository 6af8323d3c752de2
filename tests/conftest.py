import pytest

from app.services.booking_service import BookingStore
from app.storage.memory import InMemoryKeyValueStore
from factories import FakeClock, sequential_ids

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def store(clock):
    return BookingStore(InMemoryKeyValueStore(), clock=clock, id_generator=sequential_ids())
