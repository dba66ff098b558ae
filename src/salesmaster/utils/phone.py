"""Phone number normalization utilities."""

import re
from typing import Optional

DEFAULT_COUNTRY_CODE = "52"


def normalize_phone(phone: Optional[str], country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Reduce a free-text phone number to digits for a messaging link.

    Handles formats such as:
    - "55 1234 5678"
    - "(55) 1234-5678"
    - "+52 55 1234 5678"

    A 10-digit local number gets ``country_code`` prepended; any other
    length is returned as-is.

    Args:
        phone: Phone number text, possibly None

    Returns:
        Digits only, or an empty string when there are none
    """
    digits = re.sub(r"\D", "", phone or "")
    if len(digits) == 10:
        digits = country_code + digits
    return digits
