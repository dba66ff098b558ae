"""Per-session filtered views over the shared account collection.

Every push from the store runs the same pure derivation (documents to
records, vendor filter, search filter), so repeated snapshots are always
safe to process.
"""

import json
import logging
from typing import Callable, Iterable, Optional

from salesmaster.database.base import DocumentStore, Unsubscribe
from salesmaster.database.mappers import document_to_record
from salesmaster.domain.entities import AccountRecord, Document, Session

logger = logging.getLogger(__name__)

ViewConsumer = Callable[[list[AccountRecord]], None]


def matches_vendor(record: AccountRecord, vendor_name: str) -> bool:
    """Substring match of the lower-cased name against ``normalized_vendor``.

    "Ana" also matches records assigned to "Anabel".
    """
    normalized = record.normalized_vendor
    return normalized is not None and vendor_name.lower() in normalized


def filter_for_vendor(records: Iterable[AccountRecord], vendor_name: str) -> list[AccountRecord]:
    return [record for record in records if matches_vendor(record, vendor_name)]


def matches_search(record: AccountRecord, term: str) -> bool:
    """Match ``term`` anywhere in the record's JSON serialization."""
    serialized = json.dumps(record.to_document(), ensure_ascii=False, separators=(",", ":")).lower()
    return term.lower() in serialized


def search_records(records: Iterable[AccountRecord], term: str) -> list[AccountRecord]:
    if not term:
        return list(records)
    return [record for record in records if matches_search(record, term)]


class VendorViewPipeline:
    """Subscribe, receive a full snapshot, derive the view, publish it.

    Administrator sessions see every record; vendor sessions only their own.
    """

    def __init__(self, session: Session, search: str = ""):
        self.session = session
        self.search = search
        self.loaded = False
        self._mine: list[AccountRecord] = []
        self._consumers: list[ViewConsumer] = []

    @property
    def visible(self) -> list[AccountRecord]:
        return search_records(self._mine, self.search)

    def add_consumer(self, consumer: ViewConsumer) -> None:
        self._consumers.append(consumer)

    def on_snapshot(self, documents: list[Document]) -> None:
        records = [document_to_record(doc) for doc in documents]
        if self.session.is_admin:
            self._mine = records
        else:
            self._mine = filter_for_vendor(records, self.session.name)
        self.loaded = True
        logger.debug(
            "Snapshot of %d documents, %d visible to %s",
            len(documents),
            len(self._mine),
            self.session.name,
        )
        self._publish()

    def set_search(self, term: Optional[str]) -> None:
        self.search = term or ""
        if self.loaded:
            self._publish()

    def attach(self, store: DocumentStore, collection: str) -> Unsubscribe:
        """Subscribe this pipeline to a store collection."""
        return store.subscribe(collection, self.on_snapshot)

    def _publish(self) -> None:
        view = self.visible
        for consumer in list(self._consumers):
            consumer(view)
