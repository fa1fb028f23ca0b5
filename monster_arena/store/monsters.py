# monster_arena/store/monsters.py
from __future__ import annotations

import csv
import logging
import re
import uuid
from typing import IO

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from monster_arena.errors import (
    CsvImportError,
    NotFound,
    UniqueConstraintViolation,
    is_unique_error,
)
from monster_arena.models.monster import Monster
from monster_arena.schemas import MonsterCreate, MonsterUpdate, changed_fields

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("name", "attack", "defense", "hp", "speed", "image_url")
STAT_COLUMNS = ("attack", "defense", "hp", "speed")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def create_monster(db: Session, data: MonsterCreate) -> Monster:
    if db.get(Monster, data.id) is not None:
        logger.warning("monster create rejected, duplicate id=%s", data.id)
        raise UniqueConstraintViolation("monsters", data.id)

    monster = Monster(**data.model_dump())
    db.add(monster)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_error(exc):
            logger.warning("monster create lost a race, duplicate id=%s", data.id)
            raise UniqueConstraintViolation("monsters", data.id) from exc
        raise
    db.refresh(monster)

    logger.info("monster created id=%s name=%r", monster.id, monster.name)
    return monster


def get_monster(db: Session, monster_id: str) -> Monster:
    monster = db.get(Monster, monster_id)
    if monster is None:
        raise NotFound("monsters", monster_id)
    return monster


def list_monsters(db: Session) -> list[Monster]:
    return list(db.scalars(select(Monster).order_by(Monster.created_at.asc(), Monster.id.asc())))


def update_monster(db: Session, monster_id: str, data: MonsterUpdate) -> Monster:
    monster = get_monster(db, monster_id)

    changes = changed_fields(data)
    if not changes:
        return monster

    for field, value in changes.items():
        setattr(monster, field, value)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(monster)

    logger.info("monster updated id=%s fields=%s", monster.id, sorted(changes))
    return monster


def delete_monster(db: Session, monster_id: str) -> int:
    """
    Deletes the monster and every battle it won, in one transaction.
    Battles naming it only as monster_a / monster_b are left alone.
    Returns the number of battles removed with it.
    """
    monster = get_monster(db, monster_id)

    # loading the collection lets the ORM cascade see rows already in the session
    won = len(monster.battles_won)
    db.delete(monster)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("monster deleted id=%s cascaded_battles=%d", monster_id, won)
    return won


def _parse_csv(stream: IO[str]) -> list[MonsterCreate]:
    reader = csv.DictReader(stream, skipinitialspace=True)
    # lstrip the BOM in case the stream was opened as plain utf-8
    header = [h.lstrip("\ufeff").strip() for h in (reader.fieldnames or [])]
    missing = [col for col in CSV_COLUMNS if col not in header]
    if missing:
        raise CsvImportError(f"missing columns: {', '.join(missing)}")
    reader.fieldnames = header

    parsed: list[MonsterCreate] = []
    for line_no, row in enumerate(reader, start=2):
        if None in row or any(row.get(col) is None for col in CSV_COLUMNS):
            raise CsvImportError(f"line {line_no}: wrong number of fields")
        payload = {col: row[col].strip() for col in CSV_COLUMNS}
        payload["id"] = (row.get("id") or "").strip() or str(uuid.uuid4())
        for col in STAT_COLUMNS:
            # whole numbers only: "1.0", "1e3" and "1_000" are rejected
            if not _INT_RE.fullmatch(payload[col]):
                raise CsvImportError(f"line {line_no}: {col} is not an integer: {payload[col]!r}")
            payload[col] = int(payload[col])
        try:
            parsed.append(MonsterCreate.model_validate(payload))
        except ValidationError as exc:
            raise CsvImportError(f"line {line_no}: {exc.errors()[0]['msg']}") from exc

    if not parsed:
        raise CsvImportError("no monsters found in file")
    return parsed


def import_monsters_csv(db: Session, stream: IO[str]) -> tuple[list[Monster], list[str]]:
    """
    Bulk create from CSV (header: name,attack,defense,hp,speed,image_url[,id]).

    The whole file is validated first; a malformed row aborts before any insert.
    Rows whose id already exists are skipped and returned as rejected.
    """
    rows = _parse_csv(stream)

    created: list[Monster] = []
    rejected: list[str] = []
    for data in rows:
        try:
            created.append(create_monster(db, data))
        except UniqueConstraintViolation:
            rejected.append(data.id)

    logger.info("csv import done created=%d rejected=%d", len(created), len(rejected))
    return created, rejected
