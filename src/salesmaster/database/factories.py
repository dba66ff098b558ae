"""Store factory functions for creating document store instances."""

import os
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import ArgumentError, DBAPIError

from salesmaster.database.sqlalchemy_store import SQLAlchemyDocumentStore
from salesmaster.domain.errors import ConfigurationError

STORE_REMEDIATION = (
    "Set SALESMASTER_DB_URL to a valid SQLAlchemy URL, or SALESMASTER_DB_PATH "
    "(or --db-path) to a writable SQLite file location, then run the command again."
)


def create_store(database_url: str) -> SQLAlchemyDocumentStore:
    """Create a document store for any SQLAlchemy URL.

    Raises:
        ConfigurationError: If the URL cannot be used
    """
    try:
        return SQLAlchemyDocumentStore(database_url)
    except (ArgumentError, DBAPIError) as e:
        raise ConfigurationError(
            f"Cannot open document store '{database_url}': {e}", STORE_REMEDIATION
        ) from e


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyDocumentStore:
    """Create a SQLite-backed document store.

    Args:
        database_path: Path to SQLite database file. If None, checks
            SALESMASTER_DB_PATH environment variable, then defaults to
            ~/.salesmaster/salesmaster.db

    Returns:
        SQLAlchemyDocumentStore instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("SALESMASTER_DB_PATH")

    if database_path is None:
        # Default to ~/.salesmaster/salesmaster.db
        home = Path.home()
        db_dir = home / ".salesmaster"
        try:
            db_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create store directory {db_dir}: {e}", STORE_REMEDIATION
            ) from e
        database_path = str(db_dir / "salesmaster.db")

    return create_store(f"sqlite:///{database_path}")
