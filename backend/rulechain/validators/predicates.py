"""Leaf predicates — pure, stateless checks and converters used by the rule families.

Every function here is deterministic and side-effect free. None of them raise
on bad input; they answer False (or ``(0.0, False)`` for conversions) instead.
"""

import ipaddress
import math
import numbers
import re
from datetime import datetime
from decimal import Decimal
from collections.abc import Mapping, Sized
from typing import Any
from urllib.parse import urlparse

from dateutil import parser as date_parser
from email_validator import EmailNotValidError, validate_email

ALPHA_RE = re.compile(r"^[^\W\d_]+$")
ALPHA_NUM_RE = re.compile(r"^[^\W_]+$")
ALPHA_DASH_RE = re.compile(r"^[\w-]+$")
ALPHA_SPACE_RE = re.compile(r"^[\w\- ]+$")

FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

# Two defaults that differ in year, month and day; a date component the input
# leaves out shows up as a difference between the two parses.
DATE_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))

URL_SCHEMES = {"http", "https", "ftp", "ftps"}

CREDIT_CARD_SEPARATORS = re.compile(r"[\s-]")


def as_text(value: Any) -> str:
    """Render a field value the way rules read it as a string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_empty(value: Any) -> bool:
    """Zero-value emptiness: None, "", 0, 0.0, False, or an empty collection."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return not value
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (Mapping, Sized)):
        return len(value) == 0
    return False


def is_alpha(text: str) -> bool:
    return bool(ALPHA_RE.match(text))


def is_alpha_numeric(text: str) -> bool:
    return bool(ALPHA_NUM_RE.match(text))


def is_alpha_dash(text: str) -> bool:
    return bool(ALPHA_DASH_RE.match(text))


def is_alpha_space(text: str) -> bool:
    return bool(ALPHA_SPACE_RE.match(text))


def is_date(text: str) -> bool:
    """True if text names a full calendar date (year, month and day).

    Bare years, month names, day numbers and times are rejected.
    """
    if not text.strip():
        return False
    try:
        dates = {date_parser.parse(text, default=d).date() for d in DATE_FILL_DEFAULTS}
    except (ValueError, OverflowError):
        return False
    return len(dates) == 1


def is_email(text: str) -> bool:
    """Syntax-only email check; no DNS lookups."""
    try:
        validate_email(text, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def is_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def is_ipv6(text: str) -> bool:
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_url(text: str) -> bool:
    """Absolute URL with a known scheme and a host."""
    if not text or any(c.isspace() for c in text):
        return False
    try:
        parsed = urlparse(text)
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


def is_credit_card(text: str) -> bool:
    """12-19 digits (spaces and dashes allowed) passing the Luhn checksum."""
    digits = CREDIT_CARD_SEPARATORS.sub("", text)
    if not digits.isdigit() or not 12 <= len(digits) <= 19:
        return False

    total = 0
    for i, ch in enumerate(reversed(digits)):
        n = int(ch)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def is_float_parseable(text: str) -> bool:
    """True if text is a finite ASCII decimal number ("12", "-3.5", "1e3").

    Underscore separators, non-ASCII digits, nan and inf are rejected.
    """
    if not isinstance(text, str):
        return False
    text = text.strip()
    if not FLOAT_RE.match(text):
        return False
    return math.isfinite(float(text))


def to_float(value: Any) -> tuple[float, bool]:
    """Convert a raw field value to float. Returns (value, ok)."""
    if isinstance(value, bool):
        return (1.0 if value else 0.0), True
    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
        return (number, True) if math.isfinite(number) else (0.0, False)
    if isinstance(value, str) and is_float_parseable(value):
        return float(value.strip()), True
    return 0.0, False


def names_equal(a: Any, b: Any) -> bool:
    """String equality between two field values."""
    return as_text(a) == as_text(b)


def humanize(field_key: str) -> str:
    """Turn a field key into a user-facing label: 'first_name' → 'first name'."""
    return field_key.replace("_", " ")
