"""Field Normalizers: canonical forms for slug, date, time and email.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Output of each normalizer is its own fixed point (normalize(normalize(x)) == normalize(x))
    - Failures raise the typed error for the field, never a bare ValueError
"""

from datetime import datetime, timezone

from dateutil import parser as date_parser

from app.core.domain_types import EMAIL_PATTERN, SLUG_SEPARATOR_PATTERN, TIME_PATTERN
from app.core.errors import InvalidDateError, InvalidEmailError, InvalidTimeError

# Fill-ins for parts the text leaves out; two years tell whether a year was given
_DEFAULT_DATE = datetime(2000, 1, 1)
_OTHER_DEFAULT_DATE = datetime(2001, 1, 1)


def generate_slug(title: str) -> str:
    """Lowercase URL-safe slug: runs of non [a-z0-9] collapse to one dash."""
    slug = SLUG_SEPARATOR_PATTERN.sub("-", str(title).strip().lower())
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Parse free-form date text and return the UTC calendar date as YYYY-MM-DD.

    Naive parses are read as UTC; offset-aware ones are converted first,
    so "2025-06-13T23:30:00-05:00" lands on 2025-06-14. A missing month or
    day is the 1st ("June 2025" is 2025-06-01). Text without a year is
    rejected, so the result never depends on the current date.
    """
    text = str(value).strip()
    try:
        parsed = date_parser.parse(text, default=_DEFAULT_DATE)
        other = date_parser.parse(text, default=_OTHER_DEFAULT_DATE)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(str(value)) from e
    if parsed.year != other.year:
        raise InvalidDateError(str(value))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Accept only 24h HH:MM (surrounding whitespace ignored)."""
    match = TIME_PATTERN.match(str(value).strip())
    if match is None:
        raise InvalidTimeError(str(value))
    return f"{match.group(1)}:{match.group(2)}"


def normalize_email(value: str) -> str:
    email = str(value).strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailError()
    return email
