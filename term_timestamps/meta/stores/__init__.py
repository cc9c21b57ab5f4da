"""Meta stores for term metadata."""

from term_timestamps.meta.store import MetaStore
from term_timestamps.meta.stores.inmemory import InMemoryMetaStore

__all__ = [
    "MetaStore",
    "InMemoryMetaStore",
]
