"""In-memory implementation of IdentityProvider."""

from term_timestamps.identity.models import ANONYMOUS_USER_ID, User
from term_timestamps.identity.provider import IdentityProvider


class InMemoryIdentityProvider(IdentityProvider):
    """In-memory implementation of IdentityProvider for testing and development."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[int, User] = {user.id: user for user in users or []}
        self._current_user_id = ANONYMOUS_USER_ID

    def add_user(self, user: User) -> None:
        self._users[user.id] = user

    def set_current_user(self, user_id: int) -> None:
        """Switch the acting user. Pass 0 to act anonymously."""
        if user_id != ANONYMOUS_USER_ID and user_id not in self._users:
            raise KeyError(f"Unknown user ID: {user_id}")
        self._current_user_id = user_id

    def current_user_id(self) -> int:
        return self._current_user_id

    def lookup_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)
