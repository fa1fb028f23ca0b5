# monster_arena/models/battle.py
from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from monster_arena.database import Base
from monster_arena.models.timestamps import TimestampMixin


class Battle(TimestampMixin, Base):
    __tablename__ = "battles"

    id: Mapped[str] = mapped_column(String, primary_key=True)

    # participants are plain identifiers, not foreign keys
    monster_a: Mapped[str] = mapped_column(String, nullable=False)
    monster_b: Mapped[str] = mapped_column(String, nullable=False)

    winner: Mapped[str] = mapped_column(
        ForeignKey("monsters.id", ondelete="CASCADE"), index=True, nullable=False
    )
    winner_monster: Mapped["Monster"] = relationship(back_populates="battles_won")

    def __repr__(self) -> str:
        return f"<Battle {self.id} {self.monster_a} vs {self.monster_b} winner={self.winner}>"
