"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to ~/.fintrack/fintrack.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("FINTRACK_DB_PATH")

    if database_path is None:
        # Default to ~/.fintrack/fintrack.db
        home = Path.home()
        db_dir = home / ".fintrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "fintrack.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(
    database_url: Optional[str] = None, database_path: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create, connect and initialize the process-wide database.

    An explicit SQLite path wins, then an explicit URL, then FINTRACK_DATABASE_URL,
    then the SQLite defaults of ``create_sqlite_database``.

    Raises:
        StoreUnavailableError: If the store cannot be reached or initialized
    """
    if database_path is None:
        database_url = database_url or os.environ.get("FINTRACK_DATABASE_URL")

    if database_path is None and database_url:
        db = SQLAlchemyDatabase(database_url)
    else:
        db = create_sqlite_database(database_path=database_path)

    db.connect()
    db.initialize_schema()
    return db
