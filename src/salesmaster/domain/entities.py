"""Domain model entities for salesmaster.

These are pure data classes representing business concepts, independent of
how the document store persists them. Account records are deliberately
loose: the set of fields present depends on the column mapping chosen at
import time, so a record is a mapping from ``Field`` to text rather than a
fixed structure.
"""

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from enum import StrEnum
from typing import Any, Iterator, Optional

NORMALIZED_VENDOR_KEY = "normalized_vendor"


class Field(StrEnum):
    """Target fields a spreadsheet column can be mapped to."""

    IGNORE = "Ignore"
    CLIENT = "Client"
    VENDOR = "Vendor"
    AMOUNT = "Amount"
    STATUS = "Status"
    PHONE = "Phone"
    DATE = "Date"
    NOTE = "Note"

    @classmethod
    def parse(cls, name: str) -> "Field":
        """Look up a field by name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If ``name`` is not a known field
        """
        wanted = name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(name)


class Role(StrEnum):
    """Session roles."""

    ADMIN = "admin"
    VENDOR = "vendor"


@dataclass(frozen=True)
class User:
    """Identity returned by the identity provider."""

    uid: str
    is_anonymous: bool = True


@dataclass(frozen=True)
class Session:
    """Explicit session context, created at login and dropped at logout."""

    role: Role
    name: str
    user_id: str

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def vendor_key(self) -> str:
        """Lower-cased name used for substring matching against records."""
        return self.name.lower()


@dataclass(frozen=True)
class Document:
    """A stored document as returned by the document store."""

    id: str
    collection: str
    data: dict[str, Any]
    created_at: datetime


@dataclass
class AccountRecord:
    """One imported account row.

    ``normalized_vendor`` is always derived from the ``Vendor`` value and is
    never set on its own.
    """

    values: dict[Field, str] = dataclass_field(default_factory=dict)
    id: Optional[str] = None

    def set(self, field: Field, value: str) -> None:
        if field is Field.IGNORE:
            raise ValueError("Cannot set the Ignore field")
        self.values[field] = value

    def get(self, field: Field, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(field, default)

    @property
    def normalized_vendor(self) -> Optional[str]:
        vendor = self.values.get(Field.VENDOR)
        if vendor is None:
            return None
        return vendor.strip().lower()

    def has_data(self) -> bool:
        return any(value for value in self.values.values())

    def display_items(self) -> Iterator[tuple[str, str]]:
        """Yield (field name, value) pairs for display, in field order."""
        for fld in Field:
            if fld in self.values:
                yield fld.value, self.values[fld]

    def to_document(self) -> dict[str, Any]:
        """Serialize into the document shape stored remotely."""
        data: dict[str, Any] = {fld.value: value for fld, value in self.values.items()}
        if Field.VENDOR in self.values:
            data[NORMALIZED_VENDOR_KEY] = self.normalized_vendor
        return data

    @classmethod
    def from_document(cls, data: dict[str, Any], id: Optional[str] = None) -> "AccountRecord":
        """Build a record from a stored document, ignoring unknown keys."""
        record = cls(id=id)
        for key, value in data.items():
            if key == NORMALIZED_VENDOR_KEY:
                continue
            try:
                fld = Field.parse(key)
            except ValueError:
                continue
            if fld is Field.IGNORE:
                continue
            record.set(fld, "" if value is None else str(value))
        return record


@dataclass
class ColumnMapping:
    """Per-upload association of column index to target field.

    Created from header heuristics right after parsing, editable before
    commit and discarded afterwards.
    """

    headers: list[str]
    fields: dict[int, Field] = dataclass_field(default_factory=dict)

    def field_for(self, index: int) -> Field:
        return self.fields.get(index, Field.IGNORE)

    def assign(self, index: int, field: Field) -> None:
        if index < 0 or index >= len(self.headers):
            raise IndexError(index)
        self.fields[index] = field

    def mapped_columns(self) -> list[tuple[int, Field]]:
        """Return (index, field) pairs for non-ignored columns in column order."""
        return [
            (index, self.field_for(index))
            for index in range(len(self.headers))
            if self.field_for(index) is not Field.IGNORE
        ]


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a bulk replace."""

    deleted: int
    inserted: int
    batches: int
