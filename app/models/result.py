from enum import Enum
from typing import Generic, List, Literal, TypeVar, Union
from pydantic import BaseModel

from app.models.db_models import BookingRecord

T = TypeVar("T")

class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    STORAGE_FAULT = "StorageFault"

class StoreError(BaseModel):
    kind: ErrorKind
    message: str

class Ok(BaseModel, Generic[T]):
    tag: Literal["ok"] = "ok"
    value: T

    @property
    def is_ok(self) -> bool:
        return True

class Err(BaseModel):
    tag: Literal["err"] = "err"
    error: StoreError

    @property
    def is_ok(self) -> bool:
        return False

# Every BookingStore call returns one of these, callers check `tag` (or `is_ok`) first
BookingResult = Union[Ok[BookingRecord], Err]
BookingListResult = Union[Ok[List[BookingRecord]], Err]
CountResult = Union[Ok[int], Err]

def ok(value) -> Ok:
    return Ok(value=value)

def err(kind: ErrorKind, message: str) -> Err:
    return Err(error=StoreError(kind=kind, message=message))
