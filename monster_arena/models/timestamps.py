# monster_arena/models/timestamps.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, event, func
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    # Naive UTC datetime (no tzinfo). Works cleanly with SQLite.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    """
    created_at / updated_at maintained at the ORM boundary:
    - insert stamps both columns with the same instant
    - every flushed update refreshes updated_at only

    server_default covers rows written with raw SQL.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False, sort_order=100
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False, sort_order=100
    )


@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def _stamp_insert(mapper, connection, target) -> None:
    now = utcnow()
    target.created_at = now
    target.updated_at = now


@event.listens_for(TimestampMixin, "before_update", propagate=True)
def _stamp_update(mapper, connection, target) -> None:
    target.updated_at = utcnow()
