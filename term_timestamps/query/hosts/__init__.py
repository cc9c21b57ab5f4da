"""Query hosts."""

from term_timestamps.query.host import QueryHost
from term_timestamps.query.hosts.inmemory import InMemoryQueryHost

__all__ = [
    "QueryHost",
    "InMemoryQueryHost",
]
