"""Audit trail: records of who created and modified terms, and when."""

from term_timestamps.audit.models import AuditRecord, Term
from term_timestamps.audit.recorder import TimestampRecorder, utc_now

__all__ = [
    "AuditRecord",
    "Term",
    "TimestampRecorder",
    "utc_now",
]
