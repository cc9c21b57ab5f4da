"""Audit domain models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Term(BaseModel):
    """A taxonomy term owned by the host.

    Terms are never created or deleted here, only annotated.
    """

    model_config = ConfigDict(frozen=True)

    term_id: int = Field(..., gt=0, description="Host term ID")
    taxonomy: str = Field(..., min_length=1, description="Taxonomy slug")


class AuditRecord(BaseModel):
    """One attribution event: who did something to a term, and when.

    ``timestamp`` holds the stored "mysql" form when the record is written
    and the display form when it is read back through the query adapter.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int | None = Field(default=None, description="Acting user ID")
    timestamp: str | None = Field(default=None, description="Event time")

    def to_meta_value(self) -> dict[str, Any]:
        """Serialize for storage under the modifications meta key."""
        return {"user_id": self.user_id, "timestamp": self.timestamp}
