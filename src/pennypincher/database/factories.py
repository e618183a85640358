"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from pennypincher.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "PENNYPINCHER_DB_PATH"
DEFAULT_DB_DIR = ".pennypincher"
DEFAULT_DB_NAME = "pennypincher.db"


def default_database_path() -> Path:
    """Return ~/.pennypincher/pennypincher.db, creating the directory."""
    db_dir = Path.home() / DEFAULT_DB_DIR
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DEFAULT_DB_NAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    The path is taken from the argument, then PENNYPINCHER_DB_PATH, then
    default_database_path().
    """
    path = database_path or os.environ.get(DB_PATH_ENV) or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{path}")
