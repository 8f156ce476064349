"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TypeTag(str, Enum):
    """Semantic type tag assigned to a single raw JSON value."""

    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    OBJECT = "object"
    NULL = "null"
    COLLECTION = "collection"


SCALAR_TAGS: frozenset[TypeTag] = frozenset(
    {
        TypeTag.STRING,
        TypeTag.INTEGER,
        TypeTag.DOUBLE,
        TypeTag.BOOLEAN,
        TypeTag.OBJECT,
        TypeTag.NULL,
    }
)


@dataclass(frozen=True)
class ScalarNode:
    """Leaf schema node holding a primitive type tag."""

    kind: TypeTag

    def __post_init__(self) -> None:
        if self.kind not in SCALAR_TAGS:
            raise ValueError(f"Scalar schema nodes cannot carry the '{self.kind.value}' tag.")

    @property
    def is_null(self) -> bool:
        """Whether this node is the placeholder for values seen only as null."""
        return self.kind is TypeTag.NULL


@dataclass(frozen=True)
class ObjectNode:
    """Object-shaped schema node with ordered named fields."""

    fields: Mapping[str, SchemaNode]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectNode):
            return NotImplemented
        return list(self.fields.items()) == list(other.fields.items())

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))

    def __repr__(self) -> str:
        return f"ObjectNode(fields={dict(self.fields)!r})"

    def keys(self) -> tuple[str, ...]:
        """Field names in insertion order."""
        return tuple(self.fields)


@dataclass(frozen=True)
class ArrayNode:
    """Array-shaped schema node described by one element schema."""

    element: SchemaNode


SchemaNode = ScalarNode | ObjectNode | ArrayNode

NULL_NODE = ScalarNode(TypeTag.NULL)
