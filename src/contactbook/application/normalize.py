"""Loose input normalization for contact fields coming from JSON payloads."""

import re
from urllib.parse import urlparse

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_URL_SCHEMES = ("http", "https")


def required_text(value: object) -> str | None:
    """Trimmed string, or None when missing, not a string, or blank."""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def optional_email(value: object) -> str | None:
    """Keep the email only if it is a string containing '@'."""
    text = required_text(value)
    if text is None or "@" not in text:
        return None
    return text


def optional_image_url(value: object) -> str | None:
    """Keep the URL only if it is absolute http(s) with a host."""
    text = required_text(value)
    if text is None:
        return None
    parsed = urlparse(text)
    if parsed.scheme.lower() not in _URL_SCHEMES or not parsed.netloc:
        return None
    return text


def clean_tags(value: object) -> tuple[str, ...]:
    """List or tuple of strings -> trimmed non-blank strings, order kept.

    Anything else (None, a string, a dict, a number) yields no tags.
    """
    if not isinstance(value, (list, tuple)):
        return ()
    out = []
    for item in value:
        if isinstance(item, str) and item.strip():
            out.append(item.strip())
    return tuple(out)


def positive_int(value: object, default: int) -> int:
    """Parse a positive integer leniently; default when absent, unparseable or < 1.

    A leading integer prefix is accepted, so "3abc" gives 3.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 1 else default
    if not isinstance(value, str):
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    parsed = int(match.group(1))
    return parsed if parsed >= 1 else default
