from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.api import bookings, rpc
from app.core.logger import setup_logging, logger
from app.models.result import ErrorKind, err
from app.services.store_registry import get_booking_store, seed_store
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Starting Car Rental Booking Store")
    store = get_booking_store()
    if settings.SEED_FILE:
        seed_store(store, settings.SEED_FILE)
    yield
    # Shutdown
    logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

# Malformed requests (wrong types, bad query params) still answer with a tagged result
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning(f"⚠️ Invalid request to {request.url.path}: {problems}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=err(ErrorKind.VALIDATION, f"Invalid request: {problems}").model_dump(mode="json"),
    )

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error", "detail": "An unexpected error occurred. Please contact support."}
    )

# Include routers
app.include_router(bookings.router, tags=["Bookings"])
app.include_router(rpc.router, tags=["RPC"])

@app.get("/")
async def health_check():
    return {'status': 'active', 'time': datetime.now().isoformat()}

@app.get("/health")
async def health_check_std():
    return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
