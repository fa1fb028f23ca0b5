import importlib
from pathlib import Path

from monster_arena import config


def _no_mkdir(self, *args, **kwargs):
    raise AssertionError(f"unexpected mkdir {self}")


def test_database_url_from_env_creates_no_data_dir(monkeypatch):
    with monkeypatch.context() as m:
        m.setenv("DATABASE_URL", "postgresql+psycopg2://arena@db/arena")
        m.setattr(Path, "mkdir", _no_mkdir)
        reloaded = importlib.reload(config)
        assert reloaded.DATABASE_URL == "postgresql+psycopg2://arena@db/arena"
    importlib.reload(config)


def test_default_database_url_is_local_sqlite(monkeypatch):
    with monkeypatch.context() as m:
        m.delenv("DATABASE_URL", raising=False)
        reloaded = importlib.reload(config)
        assert reloaded.DATABASE_URL == f"sqlite:///{reloaded.DB_PATH.as_posix()}"
        assert reloaded.DATA_DIR.is_dir()
    importlib.reload(config)


def test_alembic_ini_can_point_outside_the_package(monkeypatch, tmp_path):
    ini = tmp_path / "alembic.ini"
    with monkeypatch.context() as m:
        m.setenv("MONSTER_ARENA_ALEMBIC_INI", str(ini))
        assert importlib.reload(config).ALEMBIC_INI == ini
    importlib.reload(config)
