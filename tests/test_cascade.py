import pytest
from sqlalchemy import event

from monster_arena.errors import ForeignKeyViolation, NotFound
from monster_arena.models.battle import Battle
from monster_arena.models.monster import Monster
from monster_arena.schemas import BattleCreate
from monster_arena.store.battles import create_battle, get_battle
from monster_arena.store.monsters import delete_monster, get_monster


def test_drake_scenario(db, make_monster, make_battle):
    make_monster("m1", name="Drake", attack=10, defense=5, hp=100, speed=7, image_url="u1")
    make_monster("m2", name="Golem", attack=8, defense=9, hp=120, speed=3, image_url="u2")

    battle = make_battle("b1", "m1", "m2", "m1")
    assert battle.winner == "m1"

    delete_monster(db, "m1")
    with pytest.raises(NotFound):
        get_battle(db, "b1")

    with pytest.raises(ForeignKeyViolation):
        create_battle(db, BattleCreate(id="b2", monster_a="m1", monster_b="m2", winner="m3"))
    assert db.query(Battle).count() == 0


def test_delete_monster_cascades_only_to_battles_it_won(db, make_monster, make_battle):
    for monster_id in ("m1", "m2", "m3"):
        make_monster(monster_id)
    make_battle("won-1", "m1", "m2", "m1")
    make_battle("won-2", "m3", "m1", "m1")
    make_battle("lost-a", "m1", "m2", "m2")
    make_battle("lost-b", "m3", "m1", "m3")
    make_battle("unrelated", "m2", "m3", "m2")

    assert delete_monster(db, "m1") == 2

    db.expunge_all()
    remaining = {b.id: b for b in db.query(Battle).all()}
    assert set(remaining) == {"lost-a", "lost-b", "unrelated"}
    # dangling participant ids stay as they were
    assert remaining["lost-a"].monster_a == "m1"
    assert remaining["lost-b"].monster_b == "m1"


def test_cascade_applies_across_sessions(db, session_factory, make_monster, make_battle):
    make_monster("m1")
    make_monster("m2")
    make_battle("b1", "m1", "m2", "m1")

    other = session_factory()
    try:
        delete_monster(other, "m1")
    finally:
        other.close()

    db.expunge_all()
    assert db.get(Battle, "b1") is None


def test_raw_delete_cascades_in_engine(db, engine, make_monster, make_battle):
    from sqlalchemy import text

    make_monster("m1")
    make_monster("m2")
    make_battle("b1", "m1", "m2", "m1")
    db.close()

    with engine.begin() as conn:
        conn.execute(text("DELETE FROM monsters WHERE id = 'm1'"))
        left = conn.execute(text("SELECT COUNT(*) FROM battles")).scalar_one()

    assert left == 0


def test_failed_delete_rolls_back_monster_and_cascade(db, make_monster, make_battle):
    make_monster("m1")
    make_monster("m2")
    make_battle("b1", "m1", "m2", "m1")

    def fail(mapper, connection, target):
        raise RuntimeError("disk full")

    event.listen(Monster, "before_delete", fail)
    try:
        with pytest.raises(RuntimeError):
            delete_monster(db, "m1")
    finally:
        event.remove(Monster, "before_delete", fail)

    db.expunge_all()
    assert get_monster(db, "m1").id == "m1"
    assert get_battle(db, "b1").winner == "m1"
