"""IdentityProvider abstract interface."""

from abc import ABC, abstractmethod

from term_timestamps.identity.models import User


class IdentityProvider(ABC):
    """Abstract interface to the host's user identity.

    Only identifies users; authentication stays with the host.
    """

    @abstractmethod
    def current_user_id(self) -> int:
        """Return the ID of the acting user, or 0 when anonymous."""
        pass

    @abstractmethod
    def lookup_user(self, user_id: int) -> User | None:
        """Resolve a user ID to a user, or None if unknown."""
        pass
