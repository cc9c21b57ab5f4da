"""History query adapter.

Projects stored audit meta into three read-only fields on every queryable
taxonomy's term type:

- ``created``: who created the term and when;
- ``lastModified``: who edited it most recently and when;
- ``modifications``: every recorded edit, newest first.

Stored timestamps are reformatted for display at read time. Anything
missing or malformed in the store resolves to None instead of raising.
"""

from collections.abc import Mapping
from typing import Any

from packaging.version import InvalidVersion, Version

from term_timestamps.audit.models import AuditRecord, Term
from term_timestamps.audit.timefmt import display_from_stored
from term_timestamps.config.models.keys import MetaKeysConfig
from term_timestamps.config.models.query import QueryConfig
from term_timestamps.identity.models import User
from term_timestamps.identity.provider import IdentityProvider
from term_timestamps.meta.store import MetaStore
from term_timestamps.observability.logging import get_logger
from term_timestamps.observability.metrics import FIELDS_REGISTERED, REGISTRATION_SKIPPED, inc
from term_timestamps.query.host import QueryHost
from term_timestamps.query.schema import FieldDefinition, ObjectType
from term_timestamps.query.types import AuditRecordNode, audit_record_type

logger = get_logger(__name__)


def to_user_id(value: Any) -> int | None:
    """Coerce a stored user ID, returning None for zero, empty or invalid values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        user_id = int(value)
    except (TypeError, ValueError):
        return None
    return user_id if user_id > 0 else None


class HistoryQueryAdapter:
    """Reads audit meta for terms and exposes it to the query layer."""

    def __init__(
        self,
        store: MetaStore,
        identity: IdentityProvider,
        keys: MetaKeysConfig | None = None,
        config: QueryConfig | None = None,
    ) -> None:
        self._store = store
        self._identity = identity
        self._keys = keys or MetaKeysConfig()
        self._config = config or QueryConfig()

    def created(self, term_id: int) -> AuditRecord | None:
        """Who created the term and when, or None if never recorded."""
        return self._single_record(
            term_id, self._keys.created_timestamp, self._keys.created_by
        )

    def last_modified(self, term_id: int) -> AuditRecord | None:
        """The most recent edit, or None if the term was never edited."""
        return self._single_record(
            term_id, self._keys.last_modified_timestamp, self._keys.last_modified_by
        )

    def modifications(self, term_id: int) -> list[AuditRecord]:
        """Every recorded edit, most recent first."""
        stored = self._store.get(term_id, self._keys.modifications, single=False) or []
        records = []
        for value in reversed(stored):
            if not isinstance(value, Mapping):
                logger.debug("modification_value_skipped", term_id=term_id)
                continue
            user_id = to_user_id(value.get("user_id"))
            timestamp = display_from_stored(value.get("timestamp"))
            if user_id is None and timestamp is None:
                logger.debug("modification_value_skipped", term_id=term_id)
                continue
            records.append(AuditRecord(user_id=user_id, timestamp=timestamp))
        return records

    def user_ref(self, user_id: Any) -> User | None:
        """Resolve a stored user ID to a user, or None."""
        resolved = to_user_id(user_id)
        if resolved is None:
            return None
        return self._identity.lookup_user(resolved)

    def record_type(self) -> ObjectType:
        return audit_record_type(self._config.record_type_name, self._config.user_type_name)

    def field_definitions(self) -> list[FieldDefinition]:
        """Build the three term fields using the configured names."""
        names = self._config.fields
        record_type = self.record_type().name
        return [
            FieldDefinition(
                name=names.created,
                type_name=record_type,
                description="Details on when the term was created",
                resolve=self._resolve_created,
            ),
            FieldDefinition(
                name=names.modifications,
                type_name=record_type,
                is_list=True,
                description="Details on term modification history",
                resolve=self._resolve_modifications,
            ),
            FieldDefinition(
                name=names.last_modified,
                type_name=record_type,
                description="Details on the last modified time and user",
                resolve=self._resolve_last_modified,
            ),
        ]

    def register_fields(self, host: QueryHost | None) -> list[str]:
        """Register the audit fields on every queryable taxonomy.

        Called when the host generates its schema. Skipped entirely when
        the query layer is disabled, absent or too old.

        Returns:
            Names of the query types the fields were added to
        """
        if host is None:
            inc(REGISTRATION_SKIPPED, reason="no_host")
            logger.info("audit_fields_skipped", reason="no_host")
            return []
        if not self._should_register(host):
            return []

        host.register_type(self.record_type())
        fields = self.field_definitions()
        registered = []
        for category in host.allowed_categories():
            if not category.query_type_name:
                logger.debug("category_without_query_type", taxonomy=category.name)
                continue
            for field in fields:
                host.register_field(category.query_type_name, field)
            inc(FIELDS_REGISTERED, len(fields), type_name=category.query_type_name)
            registered.append(category.query_type_name)

        logger.info("audit_fields_registered", type_names=registered)
        return registered

    def _should_register(self, host: QueryHost) -> bool:
        if not self._config.enabled:
            inc(REGISTRATION_SKIPPED, reason="disabled")
            logger.info("audit_fields_skipped", reason="disabled")
            return False

        version = host.version
        if version is None:
            return True
        try:
            too_old = Version(version) < Version(self._config.min_host_version)
        except InvalidVersion:
            inc(REGISTRATION_SKIPPED, reason="bad_version")
            logger.warning("audit_fields_skipped", reason="bad_version", host_version=version)
            return False
        if too_old:
            inc(REGISTRATION_SKIPPED, reason="old_version")
            logger.warning(
                "audit_fields_skipped",
                reason="old_version",
                host_version=version,
                min_version=self._config.min_host_version,
            )
            return False
        return True

    def _single_record(
        self, term_id: int, timestamp_key: str, user_key: str
    ) -> AuditRecord | None:
        timestamp = display_from_stored(self._store.get(term_id, timestamp_key, single=True))
        user_id = to_user_id(self._store.get(term_id, user_key, single=True))
        if timestamp is None and user_id is None:
            return None
        return AuditRecord(user_id=user_id, timestamp=timestamp)

    def _node(self, record: AuditRecord | None) -> AuditRecordNode | None:
        if record is None:
            return None
        return AuditRecordNode(record=record, lookup_user=self.user_ref)

    def _resolve_created(self, term: Term) -> AuditRecordNode | None:
        return self._node(self.created(term.term_id))

    def _resolve_last_modified(self, term: Term) -> AuditRecordNode | None:
        return self._node(self.last_modified(term.term_id))

    def _resolve_modifications(self, term: Term) -> list[AuditRecordNode] | None:
        records = self.modifications(term.term_id)
        if not records:
            return None
        return [AuditRecordNode(record=record, lookup_user=self.user_ref) for record in records]
