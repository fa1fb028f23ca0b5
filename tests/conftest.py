from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from monster_arena.database import Base
from monster_arena.models.battle import Battle  # noqa: F401
from monster_arena.models.monster import Monster  # noqa: F401
from monster_arena.schemas import BattleCreate, MonsterCreate
from monster_arena.store.battles import create_battle
from monster_arena.store.monsters import create_monster


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_monster(db):
    def factory(monster_id, **overrides):
        fields = {
            "id": monster_id,
            "image_url": f"https://img.example/{monster_id}.png",
            "name": monster_id.title(),
            "attack": 10,
            "defense": 5,
            "hp": 100,
            "speed": 7,
        }
        fields.update(overrides)
        return create_monster(db, MonsterCreate(**fields))

    return factory


@pytest.fixture
def make_battle(db):
    def factory(battle_id, monster_a, monster_b, winner):
        return create_battle(
            db,
            BattleCreate(id=battle_id, monster_a=monster_a, monster_b=monster_b, winner=winner),
        )

    return factory


@pytest.fixture
def ticking_clock(monkeypatch):
    """Replaces the timestamp clock with one that moves one second per call."""
    state = {"now": datetime(2023, 10, 27, 14, 30, 0)}

    def fake_utcnow():
        state["now"] += timedelta(seconds=1)
        return state["now"]

    monkeypatch.setattr("monster_arena.models.timestamps.utcnow", fake_utcnow)
    return state
