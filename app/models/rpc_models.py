from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List

from app.models.db_models import BookingInput

# --- Incoming Request Models ---

class RpcCall(BaseModel):
    id: str
    method: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

class RpcRequest(BaseModel):
    calls: List[RpcCall]

# --- Outgoing Response Models ---

class RpcCallResult(BaseModel):
    callId: str
    result: Dict[str, Any] # tagged result, already serialized with camelCase aliases

class RpcResponse(BaseModel):
    results: List[RpcCallResult]

# --- Per-method arguments ---
# Argument names on the wire are camelCase, as in the original canister interface.

class RpcArgs(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

class NoArgs(RpcArgs):
    pass

class IdArgs(RpcArgs):
    id: str

class PayloadArgs(RpcArgs):
    payload: BookingInput

class UpdateArgs(RpcArgs):
    id: str
    payload: BookingInput

class KeywordArgs(RpcArgs):
    keyword: str

class PageArgs(RpcArgs):
    page: int
    page_size: int

class TimeRangeArgs(RpcArgs):
    start_time: int
    end_time: int

class StartDateArgs(RpcArgs):
    start_date: int

class EndDateArgs(RpcArgs):
    end_date: int

class CarModelArgs(RpcArgs):
    car_model: str
