"""Tests for WhatsApp message composition and phone normalization."""

import pytest

from salesmaster.domain.entities import AccountRecord, Field
from salesmaster.domain.errors import MissingDataError
from salesmaster.domain.messaging import (
    DEFAULT_TEMPLATE,
    message_link,
    render_template,
    whatsapp_link,
)
from salesmaster.utils.phone import normalize_phone


@pytest.mark.parametrize(
    "phone,expected",
    [
        ("(55) 1234-5678", "525512345678"),
        ("55.1234.5678", "525512345678"),
        ("+52 55 1234 5678", "525512345678"),
        ("1234567", "1234567"),
        ("", ""),
        (None, ""),
        ("n/a", ""),
    ],
)
def test_normalize_phone(phone, expected):
    assert normalize_phone(phone) == expected


def test_render_default_template():
    record = AccountRecord(values={Field.CLIENT: "Ana", Field.AMOUNT: "100"})

    text = render_template(DEFAULT_TEMPLATE, record, "https://youtu.be/x")

    assert text == "Hola *Ana*, saldo: *$100*. Video: https://youtu.be/x"


def test_render_replaces_first_occurrence_only():
    record = AccountRecord(values={Field.CLIENT: "Ana"})

    assert render_template("{Client} {Client} {Amount}", record, "") == "Ana {Client} "


def test_whatsapp_link_encoding():
    link = whatsapp_link("5512345678", "Hola *Ana*, saldo: *$100*. ¿Sí?")

    assert link == (
        "https://wa.me/525512345678?text="
        "Hola%20*Ana*%2C%20saldo%3A%20*%24100*.%20%C2%BFS%C3%AD%3F"
    )


def test_missing_phone():
    record = AccountRecord(values={Field.CLIENT: "Ana"})

    with pytest.raises(MissingDataError) as excinfo:
        message_link(record, "Hola")

    assert "No phone number" in str(excinfo.value)


def test_message_link_uses_record_phone():
    record = AccountRecord(values={Field.PHONE: "521-555-123-4567"})

    assert message_link(record, "ok") == "https://wa.me/5215551234567?text=ok"
