# Method table for the /rpc endpoint: original canister call names mapped onto BookingStore

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from app.models.rpc_models import (
    CarModelArgs,
    EndDateArgs,
    IdArgs,
    KeywordArgs,
    NoArgs,
    PageArgs,
    PayloadArgs,
    RpcArgs,
    StartDateArgs,
    TimeRangeArgs,
    UpdateArgs,
)
from app.services.booking_service import BookingStore

QUERY = "query"
UPDATE = "update"

@dataclass(frozen=True)
class RpcMethod:
    name: str
    kind: str
    description: str
    args_model: Type[RpcArgs]
    handler: Callable[[BookingStore, Any], Any]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "description": self.description,
            "parameters": self.args_model.model_json_schema(by_alias=True),
        }

ALL_METHODS: List[RpcMethod] = [
    RpcMethod(
        "getCarBookings", QUERY,
        "Get all car bookings.",
        NoArgs, lambda store, args: store.list_all(),
    ),
    RpcMethod(
        "getCarBooking", QUERY,
        "Get a specific car booking by ID.",
        IdArgs, lambda store, args: store.get_by_id(args.id),
    ),
    RpcMethod(
        "addCarBooking", UPDATE,
        "Add a new car booking.",
        PayloadArgs, lambda store, args: store.add(args.payload),
    ),
    RpcMethod(
        "updateCarBooking", UPDATE,
        "Update an existing car booking by ID.",
        UpdateArgs, lambda store, args: store.update(args.id, args.payload),
    ),
    RpcMethod(
        "deleteCarBooking", UPDATE,
        "Delete a car booking by ID.",
        IdArgs, lambda store, args: store.delete(args.id),
    ),
    RpcMethod(
        "searchCarBookings", QUERY,
        "Search for car bookings whose car model contains the keyword (case-insensitive).",
        KeywordArgs, lambda store, args: store.search(args.keyword),
    ),
    RpcMethod(
        "countCarBookings", QUERY,
        "Count the total number of car bookings.",
        NoArgs, lambda store, args: store.count_all(),
    ),
    RpcMethod(
        "getCarBookingsPaginated", QUERY,
        "Get one page of car bookings (page is 1-indexed).",
        PageArgs, lambda store, args: store.paginate(args.page, args.page_size),
    ),
    RpcMethod(
        "getCarBookingsByTimeRange", QUERY,
        "Get car bookings lying entirely within a time range.",
        TimeRangeArgs, lambda store, args: store.by_time_range(args.start_time, args.end_time),
    ),
    RpcMethod(
        "getCarBookingsByStartDate", QUERY,
        "Get car bookings by start date.",
        StartDateArgs, lambda store, args: store.by_start_date(args.start_date),
    ),
    RpcMethod(
        "getCarBookingsByEndDate", QUERY,
        "Get car bookings by end date.",
        EndDateArgs, lambda store, args: store.by_end_date(args.end_date),
    ),
    RpcMethod(
        "getCarBookingsByCarModel", QUERY,
        "Get car bookings by car model (case-insensitive exact match).",
        CarModelArgs, lambda store, args: store.by_car_model(args.car_model),
    ),
]

METHODS_BY_NAME: Dict[str, RpcMethod] = {method.name: method for method in ALL_METHODS}
