"""Tests for column mapping heuristics and overrides."""

import pytest

from salesmaster.domain.column_mapping import (
    guess_field,
    override,
    parse_override,
    propose_mapping,
    resolve_column,
)
from salesmaster.domain.entities import Field
from salesmaster.domain.errors import ValidationError


def test_default_mapping_spanish_headers():
    """Test the default heuristic on a typical spreadsheet header."""
    mapping = propose_mapping(["Cliente", "Vendedor", "Monto", "Telefono", "Notas"])

    assert [mapping.field_for(i) for i in range(5)] == [
        Field.CLIENT,
        Field.VENDOR,
        Field.AMOUNT,
        Field.PHONE,
        Field.IGNORE,
    ]


def test_default_mapping_english_headers():
    mapping = propose_mapping(["Client Name", "VENDOR", "Amount Due", "Status", "Phone / Tel"])

    assert [f for _, f in mapping.mapped_columns()] == [
        Field.CLIENT,
        Field.VENDOR,
        Field.AMOUNT,
        Field.STATUS,
        Field.PHONE,
    ]


def test_guess_priority_order():
    """Test the first matching keyword in priority order wins."""
    assert guess_field("Cliente Tel") == Field.CLIENT
    assert guess_field("  ESTATUS  ") == Field.STATUS
    assert guess_field("Fecha") == Field.IGNORE


def test_override_by_index_and_header():
    mapping = propose_mapping(["Cliente", "Vendedor", "Fecha"])

    override(mapping, "2", "date")
    override(mapping, "vendedor", "Ignore")
    override(mapping, 0, Field.NOTE)

    assert mapping.field_for(0) == Field.NOTE
    assert mapping.field_for(1) == Field.IGNORE
    assert mapping.field_for(2) == Field.DATE


def test_override_allows_duplicate_fields():
    """Test two columns may map to the same field."""
    mapping = propose_mapping(["Cliente", "Nombre"])
    override(mapping, 1, "Client")

    assert mapping.mapped_columns() == [(0, Field.CLIENT), (1, Field.CLIENT)]


def test_override_unknown_field():
    mapping = propose_mapping(["Cliente"])

    with pytest.raises(ValidationError) as excinfo:
        override(mapping, 0, "Balance")

    assert "Invalid field 'Balance'" in str(excinfo.value)


@pytest.mark.parametrize("column", ["5", -1, "Missing"])
def test_resolve_column_errors(column):
    mapping = propose_mapping(["Cliente", "Monto"])

    with pytest.raises(ValidationError):
        resolve_column(mapping, column)


def test_parse_override():
    assert parse_override("Monto Total = Amount") == ("Monto Total", "Amount")
    assert parse_override("a=b=Client") == ("a=b", "Client")

    with pytest.raises(ValidationError):
        parse_override("Amount")
