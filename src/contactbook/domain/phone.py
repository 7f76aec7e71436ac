"""Phone number digit extraction for matching formatted numbers."""

import phonenumbers


def phone_digits(raw: str | None) -> str:
    """Return only the digits of raw, with non-ASCII digits mapped to ASCII.

    "+1 (202) 555-1234" -> "12025551234". Formatting characters, letters and
    whitespace are dropped. None or empty input gives "".
    """
    if not raw:
        return ""
    return phonenumbers.normalize_digits_only(str(raw))
