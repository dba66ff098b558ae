"""Administrator overview of the shared account collection."""

from salesmaster.database.base import DocumentStore
from salesmaster.database.mappers import document_to_record
from salesmaster.domain.entities import AccountRecord, Field, Session
from salesmaster.domain.session import require_admin

PREVIEW_LIMIT = 50


def display_columns(records: list[AccountRecord]) -> list[str]:
    """Field names present in any record, in field order."""
    present = {fld for record in records for fld in record.values}
    return [fld.value for fld in Field if fld in present]


class AdminOverviewService:
    """Service for the administrator's view of all accounts."""

    def __init__(self, store: DocumentStore, collection: str):
        self.store = store
        self.collection = collection

    def count(self, session: Session) -> int:
        require_admin(session)
        return self.store.count(self.collection)

    def preview(self, session: Session, limit: int = PREVIEW_LIMIT) -> list[AccountRecord]:
        """Return the first ``limit`` stored accounts."""
        require_admin(session)
        documents = self.store.list_documents(self.collection, limit=limit)
        return [document_to_record(doc) for doc in documents]
