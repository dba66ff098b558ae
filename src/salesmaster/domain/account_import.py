"""Account import domain service."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from salesmaster.database.base import DocumentStore
from salesmaster.domain.bulk_replace import BulkReplaceService, ProgressCallback
from salesmaster.domain.column_mapping import override, propose_mapping
from salesmaster.domain.entities import AccountRecord, ColumnMapping, Field, ImportResult, Session
from salesmaster.domain.errors import ValidationError
from salesmaster.domain.record_builder import build_records
from salesmaster.domain.session import require_admin
from salesmaster.domain.tabular import parse_table
from salesmaster.utils.files import read_import_file

logger = logging.getLogger(__name__)

PREVIEW_ROWS = 5


@dataclass
class ImportDraft:
    """A parsed upload waiting for its mapping to be confirmed."""

    file_name: str
    rows: list[list[str]]
    mapping: ColumnMapping

    @property
    def header(self) -> list[str]:
        return self.rows[0]

    @property
    def data_rows(self) -> list[list[str]]:
        return self.rows[1:]

    def preview(self, count: int = PREVIEW_ROWS) -> list[list[str]]:
        return self.rows[1 : 1 + count]


class AccountImportService:
    """Service for importing account spreadsheets into the shared collection."""

    def __init__(self, store: DocumentStore, collection: str, replacer: Optional[BulkReplaceService] = None):
        """Initialize account import service.

        Args:
            store: Document store instance
            collection: Collection path holding the accounts
            replacer: Bulk replace service (defaults to one for ``collection``)
        """
        self.store = store
        self.collection = collection
        self.replacer = replacer or BulkReplaceService(store, collection)

    def load_text(self, text: str, file_name: str = "") -> ImportDraft:
        """Parse raw text and propose a column mapping.

        Raises:
            ValidationError: If the text holds no rows
        """
        rows = parse_table(text)
        if not rows:
            raise ValidationError(f"No rows found in {file_name or 'input'}")
        mapping = propose_mapping(rows[0])
        logger.info(
            "Parsed %s: %d data rows, %d columns", file_name, len(rows) - 1, len(rows[0])
        )
        return ImportDraft(file_name=file_name, rows=rows, mapping=mapping)

    def load_file(self, file_path: str) -> ImportDraft:
        """Read and parse an import file.

        Raises:
            ValidationError: If the file type is not accepted or it is empty
            FileNotFoundError: If the file doesn't exist
        """
        text = read_import_file(file_path)
        return self.load_text(text, file_name=Path(file_path).name)

    def override(self, draft: ImportDraft, column: str | int, field_name: str | Field) -> None:
        """Reassign a column of the draft's mapping."""
        override(draft.mapping, column, field_name)

    def build(self, draft: ImportDraft) -> list[AccountRecord]:
        """Build records from the draft's data rows and current mapping."""
        return build_records(draft.data_rows, draft.mapping)

    def commit(
        self, session: Session, draft: ImportDraft, progress: Optional[ProgressCallback] = None
    ) -> ImportResult:
        """Replace the shared collection with the draft's records.

        Raises:
            AuthenticationError: If the session is not an administrator
            SyncError: If a purge or insert batch fails
        """
        require_admin(session)
        records = self.build(draft)
        result = self.replacer.replace(records, progress=progress)
        logger.info(
            "Import of %s complete: %d deleted, %d inserted",
            draft.file_name,
            result.deleted,
            result.inserted,
        )
        return result
