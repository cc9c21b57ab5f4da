"""User identity lookups."""

from term_timestamps.identity.models import ANONYMOUS_USER_ID, User

__all__ = ["ANONYMOUS_USER_ID", "User"]
