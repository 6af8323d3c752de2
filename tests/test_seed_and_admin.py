import json
import pandas as pd
import pytest

from admin import bookings_to_frame, paid_count
from app.core.config_loader import load_seed_bookings
from app.services.booking_service import BookingStore
from app.services.store_registry import seed_store
from app.storage.sqlite import SqliteKeyValueStore
from factories import make_input

SEED = [
    {"carModel": "Tesla Model 3", "startDate": 100, "endDate": 200, "location": "NYC", "userId": "u1", "price": 50.0, "isPaid": False},
    {"carModel": "Honda Civic", "startDate": 300, "endDate": 100, "location": "LA", "userId": "u2", "price": 20.0, "isPaid": True},
    {"carModel": "Tesla Model S", "startDate": 100, "endDate": 200, "location": "SF", "userId": "u3", "price": -5, "isPaid": True},
    {"carModel": "Kia Ceed", "startDate": 10, "endDate": 20, "location": "Prague", "userId": "u4", "price": 30.0, "isPaid": True},
]

def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)

def test_seed_store_adds_only_valid_entries(store, tmp_path):
    path = write_json(tmp_path / "seed.json", SEED)

    added = seed_store(store, path)

    # reversed dates and negative price are skipped
    assert added == 2
    assert [b.car_model for b in store.list_all().value] == ["Tesla Model 3", "Kia Ceed"]

def test_seed_store_skips_a_store_that_already_has_bookings(store, tmp_path):
    store.add(make_input(car_model="Existing"))
    path = write_json(tmp_path / "seed.json", SEED)

    assert seed_store(store, path) == 0
    assert [b.car_model for b in store.list_all().value] == ["Existing"]

def test_reseeding_a_durable_store_adds_nothing(tmp_path):
    path = write_json(tmp_path / "seed.json", SEED)
    db_file = str(tmp_path / "bookings.db")

    # two separate startups against the same file
    assert seed_store(BookingStore(SqliteKeyValueStore(db_file)), path) == 2
    restarted = BookingStore(SqliteKeyValueStore(db_file))
    assert seed_store(restarted, path) == 0
    assert restarted.count_all().value == 2

def test_load_seed_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_bookings(str(tmp_path / "nope.json"))

def test_load_seed_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(ValueError):
        load_seed_bookings(str(path))

def test_load_seed_requires_list(tmp_path):
    path = write_json(tmp_path / "object.json", {"carModel": "Tesla"})

    with pytest.raises(ValueError):
        load_seed_bookings(path)

def test_admin_frame(store, clock):
    first = store.add(make_input(is_paid=True)).value
    clock.now = 2_000
    store.update(first.id, make_input(is_paid=True, car_model="Honda Civic"))
    store.add(make_input())

    records = store.list_all().value
    df = bookings_to_frame(records)

    assert len(df) == 2
    assert list(df["car_model"]) == ["Honda Civic", "Tesla Model 3"]
    assert str(df["start_date"].dtype).startswith("datetime64")
    assert df["updated_at"].isna().tolist() == [False, True]
    assert paid_count(records) == 1

def test_admin_frame_empty():
    df = bookings_to_frame([])
    assert df.empty
    assert "car_model" in df.columns

def test_admin_frame_timestamp_past_pandas_range(store):
    # the full nat64 range goes past year 2262
    far = store.add(make_input(start_date=100, end_date=2**64 - 1)).value

    df = bookings_to_frame([far])

    assert df["end_date"].isna().tolist() == [True]
    assert df["start_date"].isna().tolist() == [False]
    assert df["start_date"][0] == pd.Timestamp(100, unit="ns")
