"""In-memory implementation of MetaStore."""

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from term_timestamps.errors import MetaWriteError
from term_timestamps.meta.store import MetaStore
from term_timestamps.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryMetaStore(MetaStore):
    """In-memory implementation of MetaStore for testing and development.

    Values are deep-copied on the way in and out so callers can never
    mutate stored history. :meth:`atomic` snapshots the store and restores
    it if the block raises.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._meta: dict[int, dict[str, list[Any]]] = {}
        self._atomic_depth = 0

    def get(self, term_id: int, key: str, single: bool = False) -> Any:
        values = self._meta.get(term_id, {}).get(key, [])
        if single:
            return copy.deepcopy(values[0]) if values else None
        return copy.deepcopy(values)

    def set_if_absent(self, term_id: int, key: str, value: Any) -> bool:
        self._check_term_id(term_id, key)
        term_meta = self._meta.setdefault(term_id, {})
        if term_meta.get(key):
            return False
        term_meta[key] = [copy.deepcopy(value)]
        return True

    def set(self, term_id: int, key: str, value: Any) -> None:
        self._check_term_id(term_id, key)
        self._meta.setdefault(term_id, {})[key] = [copy.deepcopy(value)]

    def append(self, term_id: int, key: str, value: Any) -> None:
        self._check_term_id(term_id, key)
        self._meta.setdefault(term_id, {}).setdefault(key, []).append(copy.deepcopy(value))

    @contextmanager
    def atomic(self) -> Iterator[None]:
        # Nested blocks join the outermost one.
        if self._atomic_depth:
            self._atomic_depth += 1
            try:
                yield
            finally:
                self._atomic_depth -= 1
            return

        snapshot = copy.deepcopy(self._meta)
        self._atomic_depth = 1
        try:
            yield
        except Exception:
            self._meta = snapshot
            logger.warning("meta_store_rolled_back")
            raise
        finally:
            self._atomic_depth = 0

    def delete_term(self, term_id: int) -> None:
        """Drop all meta for a term, as the host does when a term is deleted."""
        self._meta.pop(term_id, None)

    def keys(self, term_id: int) -> list[str]:
        """List keys with stored values for a term."""
        return [key for key, values in self._meta.get(term_id, {}).items() if values]

    @staticmethod
    def _check_term_id(term_id: int, key: str) -> None:
        if not isinstance(term_id, int) or isinstance(term_id, bool) or term_id <= 0:
            raise MetaWriteError(
                f"Cannot write meta for invalid term ID {term_id!r}",
                entity_id=term_id,
                key=key,
            )
