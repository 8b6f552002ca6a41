# src/fritter/scripts/migrate.py
from __future__ import annotations
import os
from alembic import command
from alembic.config import Config

from fritter.core.settings import settings

def run_upgrade_head() -> None:
    # Point Alembic at the migrations folder at the project root
    cfg = Config(os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations", "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", settings.effective_database_url)
    script_location = os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
    cfg.set_main_option("script_location", os.path.abspath(script_location))
    command.upgrade(cfg, "head")

if __name__ == "__main__":
    run_upgrade_head()
