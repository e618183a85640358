"""Database layer for pennypincher application."""

from pennypincher.database.base import Database
from pennypincher.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
