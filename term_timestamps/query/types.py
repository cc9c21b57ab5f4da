"""The shared audit record object type."""

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from term_timestamps.audit.models import AuditRecord
from term_timestamps.identity.models import User
from term_timestamps.query.schema import STRING, FieldDefinition, ObjectType


@dataclass(frozen=True)
class AuditRecordNode:
    """Parent object for audit record fields.

    Carries a formatted record plus the lookup used to resolve its user,
    so the user is only fetched when the field is selected.
    """

    record: AuditRecord
    lookup_user: Callable[[int | None], User | None]

    @property
    def time(self) -> str | None:
        return self.record.timestamp or None

    def user(self) -> User | None:
        return self.lookup_user(self.record.user_id)


def _resolve_time(node: AuditRecordNode) -> str | None:
    return node.time


def _resolve_user(node: AuditRecordNode) -> User | None:
    return node.user()


def audit_record_type(name: str = "AuditRecord", user_type_name: str = "User") -> ObjectType:
    """Return the audit record type, building it on first use.

    One instance per type name is shared by every taxonomy and field for
    the lifetime of the process.
    """
    return _build_audit_record_type(name, user_type_name)


@lru_cache(maxsize=None)
def _build_audit_record_type(name: str, user_type_name: str) -> ObjectType:
    return ObjectType(
        name=name,
        description="Who changed a term, and when",
        fields=(
            FieldDefinition(
                name="time",
                type_name=STRING,
                description="When the change happened",
                resolve=_resolve_time,
            ),
            FieldDefinition(
                name="user",
                type_name=user_type_name,
                description="The user that made the change",
                resolve=_resolve_user,
            ),
        ),
    )
