from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Wire format is camelCase (carModel, startDate...), attributes stay snake_case
_wire_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class BookingInput(BaseModel):
    """
    Payload for creating or replacing a car booking.
    Missing (or null) fields are allowed here, BookingStore decides whether the input is complete.
    """
    model_config = _wire_config

    car_model: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    location: Optional[str] = None
    user_id: Optional[str] = None
    price: Optional[float] = None
    is_paid: Optional[bool] = None

class BookingRecord(BaseModel):
    model_config = _wire_config

    id: str
    car_model: str
    start_date: int
    end_date: int
    location: str
    user_id: str
    price: float
    is_paid: bool
    created_at: int
    updated_at: Optional[int] = None # None until the first update
