import itertools

from app.models.db_models import BookingInput

class FakeClock:
    """Deterministic nanosecond clock, moved forward (or back) by hand."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

def sequential_ids(prefix: str = "booking"):
    counter = itertools.count(1)
    # Zero padded so key order == creation order
    return lambda: f"{prefix}-{next(counter):04d}"

def make_input(**overrides) -> BookingInput:
    data = {
        "car_model": "Tesla Model 3",
        "start_date": 100,
        "end_date": 200,
        "location": "NYC",
        "user_id": "u1",
        "price": 50.0,
        "is_paid": False,
    }
    data.update(overrides)
    return BookingInput(**data)
