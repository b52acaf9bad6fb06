from __future__ import annotations

import os


def database_url() -> str:
    """SQLAlchemy URL of the scenario database (e.g. postgresql+psycopg://..., sqlite:///scenarios.db)."""
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError(
            "DATABASE_URL environment variable is not set (required when SCENARIO_STORE=database)"
        )

    return url
