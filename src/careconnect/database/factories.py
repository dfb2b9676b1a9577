"""Build the store handle used by the CLI and the HTTP app."""

from pathlib import Path
from typing import Optional

from careconnect.config import Settings
from careconnect.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_DB_PATH = Path.home() / ".careconnect" / "careconnect.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then CARECONNECT_DB_PATH, then the default."""
    if database_path is None:
        database_path = Settings().db_path
    path = Path(database_path) if database_path is not None else DEFAULT_DB_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Open (creating if needed) the SQLite store at the resolved path."""
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
