"""WhatsApp message composition."""

from urllib.parse import quote

from salesmaster.domain.entities import AccountRecord, Field
from salesmaster.domain.errors import MissingDataError
from salesmaster.utils.phone import normalize_phone

DEFAULT_TEMPLATE = "Hola *{Client}*, saldo: *${Amount}*. Video: {Video}"
DEFAULT_VIDEO_LINK = "https://youtu.be/tu-video-aqui"

WHATSAPP_URL = "https://wa.me/{phone}?text={text}"

# Characters encodeURIComponent leaves alone besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def render_template(template: str, record: AccountRecord, video_link: str) -> str:
    """Fill the first ``{Client}``, ``{Amount}`` and ``{Video}`` placeholders."""
    return (
        template.replace("{Client}", record.get(Field.CLIENT, "") or "", 1)
        .replace("{Amount}", record.get(Field.AMOUNT, "") or "", 1)
        .replace("{Video}", video_link, 1)
    )


def whatsapp_link(phone: str, text: str) -> str:
    """Build a ``wa.me`` deep link.

    Raises:
        MissingDataError: If the phone number has no digits
    """
    digits = normalize_phone(phone)
    if not digits:
        raise MissingDataError("No phone number")
    return WHATSAPP_URL.format(phone=digits, text=quote(text, safe=_URI_COMPONENT_SAFE))


def message_link(record: AccountRecord, text: str) -> str:
    """Build the deep link for a record's phone number."""
    return whatsapp_link(record.get(Field.PHONE, "") or "", text)
