from app.core.config import Settings
from app.core.logger import logger
from app.storage.base import KeyValueStore
from app.storage.memory import InMemoryKeyValueStore
from app.storage.sqlite import SqliteKeyValueStore

def build_key_value_store(settings: Settings) -> KeyValueStore:
    backend = settings.STORAGE_BACKEND.lower()

    if backend == "memory":
        logger.info("🧠 Using in-memory booking storage")
        return InMemoryKeyValueStore()
    if backend == "sqlite":
        logger.info(f"💾 Using SQLite booking storage at {settings.SQLITE_PATH}")
        return SqliteKeyValueStore(settings.SQLITE_PATH)

    raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}' (expected 'memory' or 'sqlite')")
