"""Abstract document store interface."""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from salesmaster.domain.entities import Document

# Largest number of operations a single batch commit may carry.
MAX_BATCH_OPERATIONS = 500

SnapshotListener = Callable[[list[Document]], None]
Unsubscribe = Callable[[], None]


def new_document_id() -> str:
    """Return a fresh, auto-generated document identifier."""
    return uuid.uuid4().hex


class WriteBatch:
    """Collects set and delete operations and applies them in one commit."""

    def __init__(self, store: "DocumentStore"):
        self.store = store
        self.operations: list[tuple[str, str, str, Optional[dict[str, Any]]]] = []
        self.committed = False

    def set(self, collection: str, data: dict[str, Any]) -> str:
        """Queue creation of a new document. Returns its identifier."""
        doc_id = new_document_id()
        self.operations.append(("set", collection, doc_id, data))
        return doc_id

    def delete(self, collection: str, doc_id: str) -> None:
        """Queue deletion of a document."""
        self.operations.append(("delete", collection, doc_id, None))

    def __len__(self) -> int:
        return len(self.operations)

    def commit(self) -> None:
        """Apply all queued operations.

        Raises:
            ValueError: If the batch was already committed or is too large
        """
        if self.committed:
            raise ValueError("Batch already committed")
        if len(self.operations) > MAX_BATCH_OPERATIONS:
            raise ValueError(
                f"Batch has {len(self.operations)} operations; "
                f"the limit is {MAX_BATCH_OPERATIONS}"
            )
        self.store.apply_batch(self.operations)
        self.committed = True


class DocumentStore(ABC):
    """Abstract document store holding schemaless JSON documents."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create whatever backing structures the store needs."""
        pass

    @abstractmethod
    def list_documents(self, collection: str, limit: Optional[int] = None) -> list[Document]:
        """List documents of a collection in insertion order."""
        pass

    @abstractmethod
    def count(self, collection: str) -> int:
        """Count documents in a collection."""
        pass

    @abstractmethod
    def create_document(self, collection: str, data: dict[str, Any]) -> str:
        """Create a document with a generated identifier. Returns the identifier."""
        pass

    @abstractmethod
    def delete_document(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting a missing document is a no-op."""
        pass

    @abstractmethod
    def apply_batch(
        self, operations: list[tuple[str, str, str, Optional[dict[str, Any]]]]
    ) -> None:
        """Apply batch operations atomically."""
        pass

    def batch(self) -> WriteBatch:
        """Start a new write batch."""
        return WriteBatch(self)

    @abstractmethod
    def subscribe(self, collection: str, listener: SnapshotListener) -> Unsubscribe:
        """Push the full snapshot of a collection to ``listener`` on every change.

        The listener is called once right away with the current snapshot.
        Returns a callable that cancels the subscription.
        """
        pass

    @abstractmethod
    def refresh(self) -> None:
        """Re-read subscribed collections and push snapshots that changed."""
        pass
