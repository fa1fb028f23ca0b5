# monster_arena/store/battles.py
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from monster_arena.errors import (
    ForeignKeyViolation,
    NotFound,
    UniqueConstraintViolation,
    is_foreign_key_error,
    is_unique_error,
)
from monster_arena.models.battle import Battle
from monster_arena.models.monster import Monster
from monster_arena.schemas import BattleCreate, BattleUpdate, changed_fields

logger = logging.getLogger(__name__)


def _require_winner(db: Session, winner: str) -> None:
    # monster_a / monster_b are deliberately not checked: they are not foreign keys
    if db.get(Monster, winner) is None:
        logger.warning("battle write rejected, unknown winner=%s", winner)
        raise ForeignKeyViolation("battles", "winner", winner)


def _commit(db: Session, battle_id: str, winner: str | None) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_foreign_key_error(exc):
            raise ForeignKeyViolation("battles", "winner", str(winner)) from exc
        if is_unique_error(exc):
            raise UniqueConstraintViolation("battles", battle_id) from exc
        raise


def create_battle(db: Session, data: BattleCreate) -> Battle:
    if db.get(Battle, data.id) is not None:
        logger.warning("battle create rejected, duplicate id=%s", data.id)
        raise UniqueConstraintViolation("battles", data.id)
    _require_winner(db, data.winner)

    battle = Battle(**data.model_dump())
    db.add(battle)
    _commit(db, data.id, data.winner)
    db.refresh(battle)

    logger.info(
        "battle created id=%s %s vs %s winner=%s",
        battle.id, battle.monster_a, battle.monster_b, battle.winner,
    )
    return battle


def get_battle(db: Session, battle_id: str) -> Battle:
    battle = db.get(Battle, battle_id)
    if battle is None:
        raise NotFound("battles", battle_id)
    return battle


def list_battles(db: Session) -> list[Battle]:
    return list(db.scalars(select(Battle).order_by(Battle.created_at.asc(), Battle.id.asc())))


def update_battle(db: Session, battle_id: str, data: BattleUpdate) -> Battle:
    battle = get_battle(db, battle_id)

    changes = changed_fields(data)
    if not changes:
        return battle
    if "winner" in changes:
        _require_winner(db, changes["winner"])

    for field, value in changes.items():
        setattr(battle, field, value)
    _commit(db, battle_id, changes.get("winner"))
    db.refresh(battle)

    logger.info("battle updated id=%s fields=%s", battle.id, sorted(changes))
    return battle


def delete_battle(db: Session, battle_id: str) -> None:
    battle = get_battle(db, battle_id)
    db.delete(battle)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("battle deleted id=%s", battle_id)
