# monster_arena/config.py
from __future__ import annotations

import os
from pathlib import Path

# Source checkout root. alembic.ini and alembic/ live here and are not part of
# the installed package, so `monster-arena migrate` needs a checkout (or
# MONSTER_ARENA_ALEMBIC_INI pointing at one).
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = PROJECT_ROOT / "data"
DB_PATH = DATA_DIR / "arena.db"


def _default_database_url() -> str:
    # only the built-in SQLite default needs the data directory
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DB_PATH.as_posix()}"


DATABASE_URL: str = os.getenv("DATABASE_URL") or _default_database_url()

SQL_ECHO: bool = os.getenv("SQL_ECHO", "0") == "1"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

ALEMBIC_INI = Path(os.getenv("MONSTER_ARENA_ALEMBIC_INI", str(PROJECT_ROOT / "alembic.ini")))
