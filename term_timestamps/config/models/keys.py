"""Meta key name configuration.

Every meta key the recorder writes can be renamed per deployment, for
example to avoid colliding with another extension that already stores a
``created_by`` value on terms.
"""

from pydantic import BaseModel, Field, model_validator


class MetaKeysConfig(BaseModel):
    """Names of the term meta keys used to store audit data."""

    created_by: str = Field(
        default="created_by",
        min_length=1,
        description="Key holding the ID of the user that created the term",
    )
    created_timestamp: str = Field(
        default="created_timestamp",
        min_length=1,
        description="Key holding the creation timestamp",
    )
    last_modified_by: str = Field(
        default="last_modified_by",
        min_length=1,
        description="Key holding the ID of the user who last modified the term",
    )
    last_modified_timestamp: str = Field(
        default="last_modified_timestamp",
        min_length=1,
        description="Key holding the timestamp of the most recent edit",
    )
    modifications: str = Field(
        default="modifications",
        min_length=1,
        description="Multi-value key holding the full modification history",
    )

    @model_validator(mode="after")
    def _keys_are_distinct(self) -> "MetaKeysConfig":
        keys = list(self.model_dump().values())
        if len(set(keys)) != len(keys):
            raise ValueError(f"Meta key names must be distinct, got {keys}")
        return self
