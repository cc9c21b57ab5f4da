"""Host integration points."""

from term_timestamps.host.events import (
    CREATE_TERM,
    EDIT_TERMS,
    GENERATE_SCHEMA,
    HostEvents,
    InMemoryHostEvents,
)

__all__ = [
    "CREATE_TERM",
    "EDIT_TERMS",
    "GENERATE_SCHEMA",
    "HostEvents",
    "InMemoryHostEvents",
]
