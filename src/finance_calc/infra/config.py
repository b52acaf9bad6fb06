from __future__ import annotations

import logging
import os

SCENARIO_STORE_MEMORY = "memory"
SCENARIO_STORE_DATABASE = "database"
SCENARIO_STORES = {SCENARIO_STORE_MEMORY, SCENARIO_STORE_DATABASE}


def scenario_store() -> str:
    store = os.getenv("SCENARIO_STORE", SCENARIO_STORE_MEMORY).strip().lower()

    if store not in SCENARIO_STORES:
        raise RuntimeError(
            f"SCENARIO_STORE must be one of {sorted(SCENARIO_STORES)}, got {store!r}"
        )

    return store


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL {name!r} is not a valid logging level")

    return level
