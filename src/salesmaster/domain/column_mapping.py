"""Column mapping heuristics and overrides."""

from typing import Sequence

from salesmaster.domain.entities import ColumnMapping, Field
from salesmaster.domain.errors import ValidationError, unknown_field

# Checked in order; the first keyword found in a header wins.
HEADER_KEYWORDS: list[tuple[tuple[str, ...], Field]] = [
    (("client",), Field.CLIENT),
    (("vendor", "vendedor"), Field.VENDOR),
    (("amount", "monto"), Field.AMOUNT),
    (("status", "estatus"), Field.STATUS),
    (("tel",), Field.PHONE),
]


def guess_field(header: str) -> Field:
    """Return the best-guess field for a header, or ``Field.IGNORE``."""
    text = header.strip().lower()
    for keywords, fld in HEADER_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return fld
    return Field.IGNORE


def propose_mapping(header_row: Sequence[str]) -> ColumnMapping:
    """Build the initial mapping for a parsed header row."""
    headers = list(header_row)
    return ColumnMapping(
        headers=headers,
        fields={index: guess_field(header) for index, header in enumerate(headers)},
    )


def resolve_column(mapping: ColumnMapping, column: str | int) -> int:
    """Resolve a column given as a 0-based index or header text.

    Raises:
        ValidationError: If no column matches
    """
    if isinstance(column, int):
        index = column
    else:
        try:
            index = int(column)
        except ValueError:
            wanted = column.strip().lower()
            for index, header in enumerate(mapping.headers):
                if header.strip().lower() == wanted:
                    return index
            raise ValidationError(f"Column '{column}' not found")

    if index < 0 or index >= len(mapping.headers):
        raise ValidationError(
            f"Column index {index} out of range (file has {len(mapping.headers)} columns)"
        )
    return index


def override(mapping: ColumnMapping, column: str | int, field_name: str | Field) -> None:
    """Reassign one column to another field, including ``Ignore``.

    Raises:
        ValidationError: If the column or field name is unknown
    """
    index = resolve_column(mapping, column)
    if isinstance(field_name, Field):
        fld = field_name
    else:
        try:
            fld = Field.parse(field_name)
        except ValueError:
            raise ValidationError(unknown_field(field_name, [f.value for f in Field]))
    mapping.assign(index, fld)


def parse_override(entry: str) -> tuple[str, str]:
    """Split a ``COLUMN=FIELD`` option value.

    Raises:
        ValidationError: If the value has no ``=``
    """
    column, sep, field_name = entry.rpartition("=")
    if not sep or not column.strip() or not field_name.strip():
        raise ValidationError(f"Invalid mapping '{entry}'. Use COLUMN=FIELD")
    return column.strip(), field_name.strip()
