"""
Date parsing and formatting helpers.
Exercise dates are calendar dates; clients send them as text and receive
them back in a human-readable form such as "Sun Jan 15 2023".
Log bounds are compared as instants, with a stored date standing for UTC
midnight of that day.
"""
from datetime import date, datetime, time, timezone
from typing import Optional

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%a %b %d %Y"

# Accepted non-ISO input formats, tried in order
FALLBACK_DATE_FORMATS = (
    ISO_DATE_FORMAT,  # strptime also accepts non-padded fields: 2023-1-5
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    DISPLAY_DATE_FORMAT,
)


def today_string() -> str:
    """Today's date as YYYY-MM-DD"""
    return date.today().strftime(ISO_DATE_FORMAT)


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse text into a datetime, naive unless the text carries an offset"""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    try:
        return datetime.combine(date.fromisoformat(text), time.min)
    except ValueError:
        pass

    # "Z" suffix is not understood by fromisoformat on older interpreters
    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a client-supplied date string.

    Accepts ISO dates ("2023-01-15"), ISO datetimes (the date component is
    kept) and a handful of common written forms.

    Args:
        value: Text to parse

    Returns:
        Parsed date, or None if the text is not a recognizable date
    """
    parsed = _parse_datetime(value)
    return parsed.date() if parsed else None


def parse_bound(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a log bound into a timezone-aware datetime.

    Time and offset are kept; text without an offset is taken as UTC.
    Returns None if the text is not a recognizable date.
    """
    parsed = _parse_datetime(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_instant(value: date) -> datetime:
    """UTC midnight of a stored date"""
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def format_date(value: date) -> str:
    """Render a date as e.g. "Mon Jan 01 2024" """
    return value.strftime(DISPLAY_DATE_FORMAT)
