from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Car Rental Booking Store"

    # Server
    PORT: int = 8000
    ENVIRONMENT: str = "development"

    # Storage ("memory" or "sqlite")
    STORAGE_BACKEND: str = "memory"
    SQLITE_PATH: str = "car_bookings.db"

    # Optional JSON list of bookings added on startup
    SEED_FILE: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_PATH: str = "logs/errors.log"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
