import asyncio
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.models.db_models import BookingInput
from app.models.result import ErrorKind
from app.services.booking_service import BookingStore
from app.services.store_registry import get_booking_store

router = APIRouter(prefix="/bookings")

STATUS_BY_ERROR = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE_FAULT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def to_response(result, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """The tagged result goes out unchanged, only the HTTP status reflects the tag."""
    status_code = success_status if result.is_ok else STATUS_BY_ERROR[result.error.kind]
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json", by_alias=True))

# Fixed paths first, /{booking_id} would shadow them otherwise

@router.get("")
async def list_bookings(store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.list_all))

@router.get("/count")
async def count_bookings(store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.count_all))

@router.get("/search")
async def search_bookings(keyword: str = "", store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.search, keyword))

@router.get("/page")
async def paginate_bookings(
    page: int = 1,
    page_size: int = Query(10, alias="pageSize"),
    store: BookingStore = Depends(get_booking_store),
):
    return to_response(await asyncio.to_thread(store.paginate, page, page_size))

@router.get("/time-range")
async def bookings_by_time_range(
    start_time: int = Query(..., alias="startTime"),
    end_time: int = Query(..., alias="endTime"),
    store: BookingStore = Depends(get_booking_store),
):
    return to_response(await asyncio.to_thread(store.by_time_range, start_time, end_time))

@router.get("/start-date/{start_date}")
async def bookings_by_start_date(start_date: int, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.by_start_date, start_date))

@router.get("/end-date/{end_date}")
async def bookings_by_end_date(end_date: int, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.by_end_date, end_date))

@router.get("/car-model/{car_model}")
async def bookings_by_car_model(car_model: str, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.by_car_model, car_model))

@router.get("/{booking_id}")
async def get_booking(booking_id: str, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.get_by_id, booking_id))

@router.post("")
async def add_booking(payload: BookingInput, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.add, payload), success_status=status.HTTP_201_CREATED)

@router.put("/{booking_id}")
async def update_booking(booking_id: str, payload: BookingInput, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.update, booking_id, payload))

@router.delete("/{booking_id}")
async def delete_booking(booking_id: str, store: BookingStore = Depends(get_booking_store)):
    return to_response(await asyncio.to_thread(store.delete, booking_id))
