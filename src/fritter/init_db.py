# src/fritter/init_db.py
"""Create every table on the configured database."""

from fritter.db.session import create_tables

if __name__ == "__main__":
    create_tables()
    print("Database initialized.")
