"""Timestamp formats for stored and displayed audit times.

Stored values use the host's "mysql" pattern in store-local time
(``2026-01-05 14:03:09``). Values returned to query callers use the
display pattern ``Ddd Mmm D,YYYY HH:MM:SS`` (``Mon Jan 5,2026 14:03:09``).
Both are second-precision and carry no offset.
"""

from datetime import datetime

STORAGE_FORMAT = "%Y-%m-%d %H:%M:%S"
DISPLAY_PARSE_FORMAT = "%a %b %d,%Y %H:%M:%S"


def to_storage(moment: datetime) -> str:
    """Render a datetime in the stored pattern, dropping any offset."""
    return moment.strftime(STORAGE_FORMAT)


def parse_stored(value: object) -> datetime | None:
    """Parse a stored timestamp.

    Returns None for empty or unparseable values rather than raising,
    since stored meta may have been written by anything.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return parsed.replace(tzinfo=None, microsecond=0)


def to_display(moment: datetime) -> str:
    # Day of month is not zero-padded.
    return f"{moment:%a %b} {moment.day},{moment:%Y %H:%M:%S}"


def display_from_stored(value: object) -> str | None:
    """Convert a stored timestamp to the display pattern, or None."""
    parsed = parse_stored(value)
    if parsed is None:
        return None
    return to_display(parsed)


def parse_display(value: str) -> datetime:
    """Parse a display-pattern timestamp back into a naive datetime.

    Raises:
        ValueError: If the value is not in the display pattern
    """
    return datetime.strptime(value, DISPLAY_PARSE_FORMAT)
