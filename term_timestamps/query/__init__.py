"""Query layer integration for term audit history."""

from term_timestamps.query.adapter import HistoryQueryAdapter
from term_timestamps.query.schema import Category, FieldDefinition, ObjectType
from term_timestamps.query.types import AuditRecordNode, audit_record_type

__all__ = [
    "AuditRecordNode",
    "Category",
    "FieldDefinition",
    "HistoryQueryAdapter",
    "ObjectType",
    "audit_record_type",
]
