"""Turn mapped rows into account records."""

from typing import Sequence

from salesmaster.domain.entities import AccountRecord, ColumnMapping


def build_record(row: Sequence[str], mapping: ColumnMapping) -> AccountRecord:
    """Build one record from a data row.

    Each non-ignored column sets its field to the trimmed cell, or to an
    empty string when the row is shorter than the header. A later column
    mapped to the same field overwrites an earlier one.
    """
    record = AccountRecord()
    for index, fld in mapping.mapped_columns():
        cell = row[index] if index < len(row) else None
        record.set(fld, (cell or "").strip())
    return record


def build_records(rows: Sequence[Sequence[str]], mapping: ColumnMapping) -> list[AccountRecord]:
    """Build records for data rows (header excluded), dropping empty ones."""
    records = []
    for row in rows:
        record = build_record(row, mapping)
        if record.has_data():
            records.append(record)
    return records
