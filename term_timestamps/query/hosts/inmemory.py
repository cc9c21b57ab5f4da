"""In-memory implementation of QueryHost."""

from typing import Any

from term_timestamps.query.host import QueryHost
from term_timestamps.query.schema import Category, FieldDefinition, ObjectType

# field name -> sub-selection (None for leaf fields)
Selection = dict[str, "Selection | None"]


class InMemoryQueryHost(QueryHost):
    """In-memory query layer for testing and development.

    Keeps registered types and fields in dicts and can execute a nested
    field selection against a parent object.
    """

    def __init__(
        self,
        categories: list[Category] | None = None,
        version: str | None = None,
    ) -> None:
        self._categories = list(categories or [])
        self._version = version
        self.types: dict[str, ObjectType] = {}
        self.fields: dict[str, dict[str, FieldDefinition]] = {}

    @property
    def version(self) -> str | None:
        return self._version

    def allowed_categories(self) -> list[Category]:
        return list(self._categories)

    def register_type(self, object_type: ObjectType) -> None:
        self.types.setdefault(object_type.name, object_type)

    def register_field(self, type_name: str, field: FieldDefinition) -> None:
        self.fields.setdefault(type_name, {})[field.name] = field

    def execute(self, type_name: str, source: Any, selection: Selection) -> dict[str, Any]:
        """Resolve a selection of fields on ``type_name`` for ``source``."""
        result: dict[str, Any] = {}
        for name, sub_selection in selection.items():
            field = self._field(type_name, name)
            value = field.resolve(source)
            result[name] = self._complete(field, value, sub_selection)
        return result

    def _field(self, type_name: str, name: str) -> FieldDefinition:
        if type_name in self.fields and name in self.fields[type_name]:
            return self.fields[type_name][name]
        if type_name in self.types:
            return self.types[type_name].field(name)
        raise KeyError(f"Unknown field {type_name}.{name}")

    def _complete(
        self, field: FieldDefinition, value: Any, selection: Selection | None
    ) -> Any:
        if value is None or selection is None or field.type_name not in self.types:
            return value
        if field.is_list:
            return [self.execute(field.type_name, item, selection) for item in value]
        return self.execute(field.type_name, value, selection)
