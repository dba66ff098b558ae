"""Delete-all-then-insert-all refresh of the shared account collection.

The two phases are not atomic: a reader may see an empty or partly filled
collection while a replace runs, and a failure leaves completed batches in
place.
"""

import logging
import time
from typing import Callable, Iterator, Optional, Sequence, TypeVar

from salesmaster.database.base import DocumentStore
from salesmaster.domain.entities import AccountRecord, ImportResult
from salesmaster.domain.errors import SyncError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELETE_BATCH_SIZE = 400
INSERT_BATCH_SIZE = 300
INSERT_PAUSE_SECONDS = 0.1

ProgressCallback = Callable[[int], None]


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BulkReplaceService:
    """Replaces every document of a collection with freshly built records."""

    def __init__(
        self,
        store: DocumentStore,
        collection: str,
        delete_batch_size: int = DELETE_BATCH_SIZE,
        insert_batch_size: int = INSERT_BATCH_SIZE,
        pause: float = INSERT_PAUSE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.store = store
        self.collection = collection
        self.delete_batch_size = delete_batch_size
        self.insert_batch_size = insert_batch_size
        self.pause = pause
        self.sleep = sleep

    def purge(self) -> int:
        """Delete every document in the collection. Returns the number deleted."""
        try:
            doc_ids = [doc.id for doc in self.store.list_documents(self.collection)]
            for chunk in chunked(doc_ids, self.delete_batch_size):
                batch = self.store.batch()
                for doc_id in chunk:
                    batch.delete(self.collection, doc_id)
                batch.commit()
        except Exception as e:
            logger.error("Purge of %s failed: %s", self.collection, e)
            raise SyncError("Purge", str(e)) from e
        logger.info("Purged %d documents from %s", len(doc_ids), self.collection)
        return len(doc_ids)

    def insert(
        self, records: Sequence[AccountRecord], progress: Optional[ProgressCallback] = None
    ) -> tuple[int, int]:
        """Insert records in sequential batches.

        Returns:
            Tuple of (records inserted, batches committed)
        """
        inserted = 0
        batches = 0
        for chunk in chunked(records, self.insert_batch_size):
            if batches and self.pause:
                self.sleep(self.pause)
            try:
                batch = self.store.batch()
                for record in chunk:
                    batch.set(self.collection, record.to_document())
                batch.commit()
            except Exception as e:
                logger.error("Insert batch %d failed after %d records: %s", batches + 1, inserted, e)
                raise SyncError("Insert", str(e), inserted=inserted) from e
            inserted += len(chunk)
            batches += 1
            logger.debug("Inserted batch %d (%d records so far)", batches, inserted)
            if progress is not None:
                progress(inserted)
        return inserted, batches

    def replace(
        self, records: Sequence[AccountRecord], progress: Optional[ProgressCallback] = None
    ) -> ImportResult:
        """Purge the collection, then insert ``records``.

        Raises:
            SyncError: If any batch fails; remaining batches are not attempted
        """
        deleted = self.purge()
        inserted, batches = self.insert(records, progress=progress)
        return ImportResult(deleted=deleted, inserted=inserted, batches=batches)
