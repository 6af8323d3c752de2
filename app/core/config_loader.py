import json
import os
from typing import Any, Dict, List

from app.core.logger import logger

def load_seed_bookings(path: str) -> List[Dict[str, Any]]:
    """
    Loads seed bookings (a JSON list of booking payloads) from a file.
    Raises FileNotFoundError if the file is missing, ValueError if it is not a JSON list.
    """
    if not os.path.exists(path):
        logger.critical(f"❌ Seed file '{path}' not found!")
        raise FileNotFoundError(f"Seed file not found at {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            entries = json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Invalid JSON in seed file {path}: {e}")
        raise ValueError(f"Invalid JSON in seed file: {e}")

    if not isinstance(entries, list):
        logger.critical(f"❌ Seed file {path} must contain a JSON list, got {type(entries).__name__}")
        raise ValueError("Seed file must contain a JSON list of bookings")

    logger.info(f"✅ Loaded {len(entries)} seed bookings from {path}")
    return entries
