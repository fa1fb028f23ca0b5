"""CLI utilities for the monster arena database."""
import logging
from pathlib import Path

import typer
from alembic import command
from alembic.config import Config

from monster_arena.config import ALEMBIC_INI, LOG_LEVEL
from monster_arena.database import check_db_connection, get_db
from monster_arena.errors import ConnectionFailure, CsvImportError
from monster_arena.store.monsters import import_monsters_csv

app = typer.Typer(help="Monster arena CLI")

logger = logging.getLogger(__name__)


@app.callback()
def main(log_level: str = typer.Option(LOG_LEVEL, help="Root log level.")):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def migrate(revision: str = "head"):
    """Run Alembic migrations."""
    if not ALEMBIC_INI.exists():
        # migrations live in the source checkout, not in the installed package
        typer.echo(f"alembic config not found: {ALEMBIC_INI}", err=True)
        raise typer.Exit(code=1)
    cfg = Config(str(ALEMBIC_INI))
    command.upgrade(cfg, revision)


@app.command("check-db")
def check_db():
    """Check that the database answers."""
    try:
        check_db_connection()
    except ConnectionFailure as exc:
        logger.error("%s", exc)
        typer.echo("database: unavailable", err=True)
        raise typer.Exit(code=1)
    typer.echo("database: ok")


@app.command("import-monsters")
def import_monsters(path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True)):
    """Import monsters from a CSV file."""
    sessions = get_db()
    db = next(sessions)
    try:
        # utf-8-sig drops the BOM spreadsheet exports put in front of the header
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            created, rejected = import_monsters_csv(db, handle)
    except CsvImportError as exc:
        typer.echo(f"import failed: {exc}", err=True)
        raise typer.Exit(code=2)
    finally:
        sessions.close()

    typer.echo(f"created: {len(created)}")
    if rejected:
        typer.echo(f"rejected (duplicate id): {', '.join(rejected)}")


if __name__ == "__main__":
    app()
