"""Database layer for careconnect application."""

from careconnect.database.base import Database
from careconnect.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
