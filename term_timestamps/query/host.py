"""QueryHost abstract interface."""

from abc import ABC, abstractmethod

from term_timestamps.query.schema import Category, FieldDefinition, ObjectType


class QueryHost(ABC):
    """Abstract interface to the host's query-serving layer.

    Exposes which taxonomies are queryable and accepts type and field
    registrations while the host builds its schema.
    """

    @property
    @abstractmethod
    def version(self) -> str | None:
        """Version of the query layer, or None if it does not report one."""
        pass

    @abstractmethod
    def allowed_categories(self) -> list[Category]:
        """Taxonomies currently exposed for querying."""
        pass

    @abstractmethod
    def register_type(self, object_type: ObjectType) -> None:
        """Add an object type to the schema. Re-registering is a no-op."""
        pass

    @abstractmethod
    def register_field(self, type_name: str, field: FieldDefinition) -> None:
        """Add a field to an existing query type."""
        pass
