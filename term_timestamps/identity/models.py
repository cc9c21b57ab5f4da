"""Identity models."""

from pydantic import BaseModel, ConfigDict, Field

# User ID the host reports when nobody is logged in.
ANONYMOUS_USER_ID = 0


class User(BaseModel):
    """A host user, as returned by the identity lookup."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Host user ID")
    login: str = Field(..., min_length=1, description="Login name")
    display_name: str | None = Field(default=None, description="Public name")
    email: str | None = Field(default=None, description="Contact email")
