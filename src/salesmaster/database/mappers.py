"""Mapper functions to convert stored rows into domain entities."""

from salesmaster.domain import entities as domain
from salesmaster.database.models import StoredDocument as ORMDocument


def document_to_domain(orm_document: ORMDocument) -> domain.Document:
    """Convert SQLAlchemy StoredDocument model to domain Document entity."""
    return domain.Document(
        id=orm_document.id,
        collection=orm_document.collection,
        data=dict(orm_document.data or {}),
        created_at=orm_document.created_at,
    )


def document_to_record(document: domain.Document) -> domain.AccountRecord:
    """Convert a stored document into an account record."""
    return domain.AccountRecord.from_document(document.data, id=document.id)
