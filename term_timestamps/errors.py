"""Exception hierarchy for term-timestamps.

Store failures are never swallowed: they surface to the host's event
dispatcher, which decides whether the term operation itself fails.
"""


class TermTimestampsError(Exception):
    """Base exception for all term-timestamps errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(TermTimestampsError):
    """Raised when settings cannot be used to build a component."""


class InvalidEntityError(TermTimestampsError):
    """Raised when a host event carries an unusable term identifier."""

    def __init__(self, message: str, entity_id: object = None) -> None:
        super().__init__(message)
        self.entity_id = entity_id


class MetaStoreError(TermTimestampsError):
    """Base exception for meta store failures."""


class MetaWriteError(MetaStoreError):
    """Raised when a meta store write fails."""

    def __init__(self, message: str, entity_id: int, key: str) -> None:
        super().__init__(message)
        self.entity_id = entity_id
        self.key = key
