"""Clock configuration."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class ClockConfig(BaseModel):
    """Timezone used when stamping records.

    Timestamps are stored in store-local time without an offset, so the
    timezone must match the one the host uses for its own dates.
    """

    timezone: str = Field(default="UTC", description="IANA timezone name")

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value!r}") from e
        return value
