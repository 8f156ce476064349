"""Model emission entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from schema_learner.schema_management import ObjectNode, TypeTag


class FieldTypeKind(str, Enum):
    """Shape of an emitted field type."""

    PRIMITIVE = "primitive"
    NAMED = "named"
    COLLECTION = "collection"


@dataclass(frozen=True)
class FieldType:
    """Type of one emitted field."""

    kind: FieldTypeKind
    primitive: TypeTag | None = None
    type_name: str | None = None
    element: FieldType | None = None

    @classmethod
    def of_primitive(cls, tag: TypeTag) -> FieldType:
        return cls(kind=FieldTypeKind.PRIMITIVE, primitive=tag)

    @classmethod
    def of_named(cls, type_name: str) -> FieldType:
        return cls(kind=FieldTypeKind.NAMED, type_name=type_name)

    @classmethod
    def collection_of(cls, element: FieldType) -> FieldType:
        return cls(kind=FieldTypeKind.COLLECTION, element=element)

    def describe(self) -> str:
        """Human readable form, e.g. ``collection of Order``."""
        if self.kind is FieldTypeKind.COLLECTION and self.element is not None:
            return f"collection of {self.element.describe()}"
        if self.kind is FieldTypeKind.NAMED and self.type_name is not None:
            return self.type_name
        if self.primitive is not None:
            return self.primitive.value
        return TypeTag.OBJECT.value


@dataclass(frozen=True)
class FieldDefinition:
    """One emitted field, keeping the raw JSON key it was derived from."""

    name: str
    json_key: str
    field_type: FieldType


@dataclass(frozen=True)
class TypeDefinition:
    """Named type with its fields in schema order."""

    name: str
    fields: tuple[FieldDefinition, ...]

    def field_names(self) -> tuple[str, ...]:
        return tuple(field.name for field in self.fields)


@dataclass(frozen=True)
class NestedType:
    """Nested type that still needs its own merge pass against the store."""

    type_name: str
    schema: ObjectNode


@dataclass(frozen=True)
class EmittedType:
    """Result of emitting one object schema."""

    definition: TypeDefinition
    nested: tuple[NestedType, ...]
