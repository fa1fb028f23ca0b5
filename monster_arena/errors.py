# monster_arena/errors.py
from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# SQLSTATE codes reported by PostgreSQL drivers
_PG_FOREIGN_KEY_VIOLATION = "23503"
_PG_UNIQUE_VIOLATION = "23505"


class StoreError(Exception):
    """Base class for everything the stores raise on purpose."""


class NotFound(StoreError):
    def __init__(self, table: str, key: str) -> None:
        super().__init__(f"{table}: no row with id {key!r}")
        self.table = table
        self.key = key


class UniqueConstraintViolation(StoreError):
    def __init__(self, table: str, key: str) -> None:
        super().__init__(f"{table}: id {key!r} already exists")
        self.table = table
        self.key = key


class ForeignKeyViolation(StoreError):
    def __init__(self, table: str, column: str, value: str) -> None:
        super().__init__(f"{table}.{column}: {value!r} does not reference an existing monster")
        self.table = table
        self.column = column
        self.value = value


class ConnectionFailure(StoreError):
    """The database engine could not be reached."""


class CsvImportError(StoreError):
    """The import file is empty or has a malformed row; nothing was written."""


def is_foreign_key_error(exc: IntegrityError) -> bool:
    code = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
    if code:
        return code == _PG_FOREIGN_KEY_VIOLATION
    return "foreign key" in str(exc.orig).lower()


def is_unique_error(exc: IntegrityError) -> bool:
    code = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
    if code:
        return code == _PG_UNIQUE_VIOLATION
    message = str(exc.orig).lower()
    return "unique" in message or "primary key" in message
