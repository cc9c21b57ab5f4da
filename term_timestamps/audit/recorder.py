"""Timestamp recorder.

Listens for term lifecycle events from the host and writes who/when meta:

- on creation, ``created_by`` and ``created_timestamp`` are written once
  and never replaced;
- on every edit, ``last_modified_by`` and ``last_modified_timestamp`` are
  overwritten and a record is appended to ``modifications``.

Store errors propagate to the host after being logged; nothing is retried.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from term_timestamps.audit.models import AuditRecord
from term_timestamps.audit.timefmt import to_storage
from term_timestamps.config.models.keys import MetaKeysConfig
from term_timestamps.errors import InvalidEntityError
from term_timestamps.identity.provider import IdentityProvider
from term_timestamps.meta.store import MetaStore
from term_timestamps.observability.logging import (
    bind_term_context,
    clear_term_context,
    get_logger,
)
from term_timestamps.observability.metrics import AUDIT_WRITE_ERRORS, AUDIT_WRITES, inc

logger = get_logger(__name__)

Clock = Callable[[], datetime]

# (term_id, taxonomy, record) -> value stored under the modifications key
ValueBuilder = Callable[[int, str, AuditRecord], Any]


def utc_now() -> datetime:
    return datetime.now(UTC)


class TimestampRecorder:
    """Writes creation and modification audit meta for terms."""

    def __init__(
        self,
        store: MetaStore,
        identity: IdentityProvider,
        keys: MetaKeysConfig | None = None,
        clock: Clock | None = None,
        value_builder: ValueBuilder | None = None,
        timezone: str = "UTC",
    ) -> None:
        self._store = store
        self._identity = identity
        self._keys = keys or MetaKeysConfig()
        self._clock = clock or utc_now
        self._value_builder = value_builder
        self._tz = ZoneInfo(timezone)

    @property
    def keys(self) -> MetaKeysConfig:
        return self._keys

    def on_entity_created(self, term_id: int, taxonomy: str) -> None:
        """Record who created a term and when.

        Both values use set-if-absent semantics, so a repeated call for
        the same term keeps the first values. The two writes run inside
        the store's atomic block.
        """
        _check_term_id(term_id)
        record = self._sample()
        bind_term_context(term_id, taxonomy)
        try:
            with self._store.atomic():
                created_by = self._store.set_if_absent(
                    term_id, self._keys.created_by, record.user_id
                )
                created_at = self._store.set_if_absent(
                    term_id, self._keys.created_timestamp, record.timestamp
                )
        except Exception as e:
            self._write_failed("created", taxonomy, e)
            raise
        finally:
            clear_term_context()

        if created_by or created_at:
            inc(AUDIT_WRITES, event="created", taxonomy=taxonomy)
            logger.info(
                "term_created_recorded",
                term_id=term_id,
                taxonomy=taxonomy,
                user_id=record.user_id,
                timestamp=record.timestamp,
            )
        else:
            logger.debug("term_created_already_recorded", term_id=term_id, taxonomy=taxonomy)

    def on_entity_modified(self, term_id: int, taxonomy: str) -> None:
        """Record an edit to a term.

        The last-modified values are overwritten and the same record is
        appended to the modification history. All three writes share one
        clock and user sample and run inside the store's atomic block.
        """
        _check_term_id(term_id)
        record = self._sample()
        bind_term_context(term_id, taxonomy)
        try:
            with self._store.atomic():
                self._store.set(term_id, self._keys.last_modified_by, record.user_id)
                self._store.set(
                    term_id, self._keys.last_modified_timestamp, record.timestamp
                )
                self._store.append(
                    term_id,
                    self._keys.modifications,
                    self.prepare_meta_value(term_id, taxonomy, record),
                )
        except Exception as e:
            self._write_failed("modified", taxonomy, e)
            raise
        finally:
            clear_term_context()

        inc(AUDIT_WRITES, event="modified", taxonomy=taxonomy)
        logger.info(
            "term_modified_recorded",
            term_id=term_id,
            taxonomy=taxonomy,
            user_id=record.user_id,
            timestamp=record.timestamp,
        )

    def prepare_meta_value(self, term_id: int, taxonomy: str, record: AuditRecord) -> Any:
        """Build the value appended to the modification history."""
        if self._value_builder is not None:
            return self._value_builder(term_id, taxonomy, record)
        return record.to_meta_value()

    def _sample(self) -> AuditRecord:
        moment = self._clock()
        # Naive clock readings are taken as already store-local.
        if moment.tzinfo is not None:
            moment = moment.astimezone(self._tz)
        return AuditRecord(
            user_id=self._identity.current_user_id(),
            timestamp=to_storage(moment),
        )

    @staticmethod
    def _write_failed(event: str, taxonomy: str, error: Exception) -> None:
        inc(
            AUDIT_WRITE_ERRORS,
            event=event,
            taxonomy=taxonomy,
            error_type=type(error).__name__,
        )
        logger.error("audit_write_failed", audit_event=event, error=str(error))


def _check_term_id(term_id: Any) -> None:
    if not isinstance(term_id, int) or isinstance(term_id, bool) or term_id <= 0:
        raise InvalidEntityError(f"Invalid term ID: {term_id!r}", entity_id=term_id)
