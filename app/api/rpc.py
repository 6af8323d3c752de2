import asyncio
from fastapi import APIRouter, Depends
from pydantic import ValidationError
from typing import Any, Dict, List

from app.core.logger import logger
from app.models.result import ErrorKind, err
from app.models.rpc_models import RpcCall, RpcCallResult, RpcRequest, RpcResponse
from app.services.booking_service import BookingStore
from app.services.store_registry import get_booking_store
from app.tools.definitions import ALL_METHODS, METHODS_BY_NAME

router = APIRouter()

def dispatch_call(store: BookingStore, call: RpcCall):
    """Runs a single call, a bad method name or bad arguments only fail that call."""
    method = METHODS_BY_NAME.get(call.method)
    if method is None:
        logger.warning(f"⚠️ Unknown RPC method: {call.method}")
        return err(ErrorKind.VALIDATION, f"Unknown method '{call.method}'")

    try:
        args = method.args_model.model_validate(call.arguments)
    except ValidationError as e:
        logger.warning(f"⚠️ Invalid arguments for {call.method}: {e.error_count()} error(s)")
        return err(ErrorKind.VALIDATION, f"Invalid arguments for {call.method}: {e}")

    return method.handler(store, args)

@router.post("/rpc", response_model=RpcResponse)
async def rpc(request: RpcRequest, store: BookingStore = Depends(get_booking_store)) -> RpcResponse:
    """
    Batch endpoint mirroring the original canister interface.
    Each call gets its own tagged result, in request order.
    """
    results = []
    for call in request.calls:
        logger.info(f"🔔 RPC call: {call.method} ({call.id})")
        result = await asyncio.to_thread(dispatch_call, store, call)
        results.append(RpcCallResult(
            callId=call.id,
            result=result.model_dump(mode="json", by_alias=True),
        ))

    return RpcResponse(results=results)

@router.get("/rpc/methods")
async def list_methods() -> List[Dict[str, Any]]:
    return [method.describe() for method in ALL_METHODS]
