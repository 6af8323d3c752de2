import pytest

from factories import make_input

@pytest.fixture
def three_cars(store):
    for model in ("Tesla Model 3", "Honda Civic", "Tesla Model S"):
        store.add(make_input(car_model=model))
    return store

def models(result):
    return [b.car_model for b in result.value]

def test_search_is_case_insensitive_substring(three_cars):
    assert models(three_cars.search("tesla")) == ["Tesla Model 3", "Tesla Model S"]
    assert models(three_cars.search("CIVIC")) == ["Honda Civic"]
    assert models(three_cars.search("model")) == ["Tesla Model 3", "Tesla Model S"]

def test_search_empty_keyword_matches_all(three_cars):
    assert len(three_cars.search("").value) == 3

def test_search_without_match(three_cars):
    result = three_cars.search("ferrari")
    assert result.is_ok
    assert result.value == []

def test_by_car_model_is_exact_match(three_cars):
    assert models(three_cars.by_car_model("tesla model 3")) == ["Tesla Model 3"]
    assert models(three_cars.by_car_model("HONDA CIVIC")) == ["Honda Civic"]
    # substring is not enough
    assert three_cars.by_car_model("tesla").value == []

def test_list_all_in_key_order(three_cars):
    ids = [b.id for b in three_cars.list_all().value]
    assert ids == sorted(ids)
    assert three_cars.count_all().value == 3

@pytest.fixture
def five_bookings(store):
    for i in range(5):
        store.add(make_input(car_model=f"Car {i}"))
    return store

def test_paginate_second_page(five_bookings):
    assert models(five_bookings.paginate(2, 2)) == ["Car 2", "Car 3"]

def test_paginate_truncated_last_page(five_bookings):
    assert models(five_bookings.paginate(3, 2)) == ["Car 4"]

def test_paginate_past_the_end(five_bookings):
    result = five_bookings.paginate(10, 2)
    assert result.is_ok
    assert result.value == []

@pytest.mark.parametrize("page,page_size", [(0, 2), (-1, 2), (1, 0), (1, -3), (0, 0)])
def test_paginate_non_positive_inputs_return_empty(five_bookings, page, page_size):
    result = five_bookings.paginate(page, page_size)
    assert result.is_ok
    assert result.value == []

def test_paginate_page_larger_than_collection(five_bookings):
    assert len(five_bookings.paginate(1, 50).value) == 5

@pytest.fixture
def windows(store):
    store.add(make_input(car_model="inside", start_date=100, end_date=200))
    store.add(make_input(car_model="edges", start_date=50, end_date=300))
    store.add(make_input(car_model="overlap-left", start_date=20, end_date=120))
    store.add(make_input(car_model="overlap-right", start_date=250, end_date=400))
    store.add(make_input(car_model="outside", start_date=500, end_date=600))
    return store

def test_by_time_range_is_containment(windows):
    assert models(windows.by_time_range(50, 300)) == ["inside", "edges"]

def test_by_time_range_without_match(windows):
    assert windows.by_time_range(1_000, 2_000).value == []

def test_by_start_date(windows):
    assert models(windows.by_start_date(250)) == ["overlap-right"]
    assert windows.by_start_date(251).value == []

def test_by_end_date(windows):
    assert models(windows.by_end_date(200)) == ["inside"]
    assert windows.by_end_date(199).value == []

def test_filters_see_updates(windows):
    target = windows.by_start_date(500).value[0]
    windows.update(target.id, make_input(car_model="moved", start_date=60, end_date=70))

    assert windows.by_start_date(500).value == []
    assert models(windows.by_time_range(50, 300)) == ["inside", "edges", "moved"]
