"""Identity providers."""

from term_timestamps.identity.provider import IdentityProvider
from term_timestamps.identity.providers.inmemory import InMemoryIdentityProvider

__all__ = [
    "IdentityProvider",
    "InMemoryIdentityProvider",
]
