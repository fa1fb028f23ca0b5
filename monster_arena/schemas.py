# monster_arena/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _StrictModel(BaseModel):
    # no "10" -> 10 coercion; strings stay strings, ints stay ints
    model_config = ConfigDict(strict=True, extra="forbid")


class MonsterCreate(_StrictModel):
    id: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    name: str
    attack: int
    defense: int
    hp: int
    speed: int


class MonsterUpdate(_StrictModel):
    image_url: str | None = Field(default=None, min_length=1)
    name: str | None = None
    attack: int | None = None
    defense: int | None = None
    hp: int | None = None
    speed: int | None = None


class BattleCreate(_StrictModel):
    id: str = Field(min_length=1)
    monster_a: str
    monster_b: str
    winner: str


class BattleUpdate(_StrictModel):
    monster_a: str | None = None
    monster_b: str | None = None
    winner: str | None = None


def changed_fields(patch: BaseModel) -> dict[str, Any]:
    """Fields the caller actually set, explicit None treated as "leave alone"."""
    return patch.model_dump(exclude_unset=True, exclude_none=True)
