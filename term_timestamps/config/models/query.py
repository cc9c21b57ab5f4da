"""Query layer configuration models."""

from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, Field, field_validator


class QueryFieldsConfig(BaseModel):
    """Names of the fields exposed on each term query type."""

    created: str = Field(default="created", min_length=1)
    modifications: str = Field(default="modifications", min_length=1)
    last_modified: str = Field(default="lastModified", min_length=1)


class QueryConfig(BaseModel):
    """Query layer integration settings."""

    enabled: bool = Field(
        default=True,
        description="Register audit fields with the host query layer",
    )
    fields: QueryFieldsConfig = Field(
        default_factory=QueryFieldsConfig,
        description="Exposed field names",
    )
    record_type_name: str = Field(
        default="AuditRecord",
        min_length=1,
        description="Name of the shared object type describing one audit record",
    )
    user_type_name: str = Field(
        default="User",
        min_length=1,
        description="Name of the host's user object type",
    )
    min_host_version: str = Field(
        default="0.0.12",
        description="Oldest query layer version the fields are registered with",
    )

    @field_validator("min_host_version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        try:
            Version(value)
        except InvalidVersion as e:
            raise ValueError(f"Invalid version string: {value!r}") from e
        return value
