"""Host lifecycle event dispatch.

The host fires these after its own persistence has completed:

- ``create_term(term_id, tt_id, taxonomy)``
- ``edit_terms(term_id, taxonomy)``
- ``generate_schema()`` when the query layer builds its schema
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from term_timestamps.observability.logging import get_logger

logger = get_logger(__name__)

CREATE_TERM = "create_term"
EDIT_TERMS = "edit_terms"
GENERATE_SCHEMA = "generate_schema"

Handler = Callable[..., Any]


class HostEvents(ABC):
    """Abstract interface to the host's event dispatcher."""

    @abstractmethod
    def subscribe(self, event: str, handler: Handler) -> None:
        """Call ``handler`` every time ``event`` fires."""
        pass


class InMemoryHostEvents(HostEvents):
    """Synchronous in-process dispatcher for testing and development.

    Handlers run in subscription order. A handler error stops dispatch
    and propagates to whoever fired the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, event: str, handler: Handler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, *args: Any) -> None:
        handlers = self._handlers.get(event, [])
        logger.debug("host_event_fired", host_event=event, handlers=len(handlers))
        for handler in handlers:
            handler(*args)

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))
