"""Apply the Alembic history to a scratch SQLite file."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

MIGRATIONS = Path(__file__).resolve().parents[1] / "migrations"


def test_upgrade_head_creates_freet_schema(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("ALEMBIC_URL", url)
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS))

    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert {"user_account", "freet", "expand", "source", "similar", "alembic_version"} <= tables
