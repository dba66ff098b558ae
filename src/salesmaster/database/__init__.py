"""Document store layer for salesmaster."""

from salesmaster.database.base import DocumentStore, WriteBatch
from salesmaster.database.factories import create_sqlite_store, create_store

__all__ = ["DocumentStore", "WriteBatch", "create_sqlite_store", "create_store"]
