# monster_arena/models/monster.py
from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from monster_arena.database import Base
from monster_arena.models.battle import Battle
from monster_arena.models.timestamps import TimestampMixin


class Monster(TimestampMixin, Base):
    __tablename__ = "monsters"

    # caller-assigned, never generated here
    id: Mapped[str] = mapped_column(String, primary_key=True)

    image_url: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # combat stats, no range enforced
    attack: Mapped[int] = mapped_column(Integer, nullable=False)
    defense: Mapped[int] = mapped_column(Integer, nullable=False)
    hp: Mapped[int] = mapped_column(Integer, nullable=False)
    speed: Mapped[int] = mapped_column(Integer, nullable=False)

    # ON DELETE CASCADE does the work; loaded rows are removed by the ORM
    battles_won: Mapped[list[Battle]] = relationship(
        back_populates="winner_monster",
        cascade="all, delete",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Monster {self.id} {self.name!r}>"
