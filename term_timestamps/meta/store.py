"""MetaStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class MetaStore(ABC):
    """Abstract interface to the host's per-term metadata store.

    Maps ``(term_id, key)`` to an ordered list of values. A key written
    with :meth:`set_if_absent` or :meth:`set` holds a single value; a key
    written with :meth:`append` accumulates values in insertion order.
    Implementations raise :class:`~term_timestamps.errors.MetaWriteError`
    when a write cannot be applied.
    """

    @abstractmethod
    def get(self, term_id: int, key: str, single: bool = False) -> Any:
        """Read meta for a term.

        With ``single=True`` returns the first stored value or None.
        Otherwise returns every stored value, oldest first (empty list
        when the key is unset).
        """
        pass

    @abstractmethod
    def set_if_absent(self, term_id: int, key: str, value: Any) -> bool:
        """Store a value only if the key has no value yet.

        Returns True when the value was written.
        """
        pass

    @abstractmethod
    def set(self, term_id: int, key: str, value: Any) -> None:
        """Store a single value, replacing any existing values."""
        pass

    @abstractmethod
    def append(self, term_id: int, key: str, value: Any) -> None:
        """Add a value after any existing values. Never overwrites."""
        pass

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Group several writes so they apply together.

        The default does not batch anything: a failure part-way through
        leaves earlier writes in place. Stores that support transactions
        override this to roll back on error.
        """
        yield
