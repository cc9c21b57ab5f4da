"""Schema definitions handed to the host query layer.

These describe fields and object types without depending on any
particular query engine; the host turns them into its own schema.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Receives the parent object (a Term for term fields, a record node for
# audit record fields) and returns the field value.
Resolver = Callable[[Any], Any]

STRING = "String"


class FieldDefinition(BaseModel):
    """A single field on a query type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    type_name: str = Field(..., min_length=1, description="Name of the field's type")
    is_list: bool = Field(default=False, description="Field returns a list of type_name")
    description: str = ""
    resolve: Resolver


class ObjectType(BaseModel):
    """A named object type with a fixed set of fields."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    fields: tuple[FieldDefinition, ...] = ()

    def field(self, name: str) -> FieldDefinition:
        for field in self.fields:
            if field.name == name:
                return field
        raise KeyError(f"{self.name} has no field {name!r}")


class Category(BaseModel):
    """A taxonomy the host exposes for querying."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Taxonomy slug")
    query_type_name: str | None = Field(
        default=None,
        description="Name of the taxonomy's term type in the query schema",
    )
