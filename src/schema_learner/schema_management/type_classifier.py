"""Type classification and schema inference for raw JSON values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import NULL_NODE, ArrayNode, ObjectNode, ScalarNode, SchemaNode, TypeTag


def classify_value(value: Any) -> TypeTag:
    """Return the type tag of one raw JSON value.

    Classification only looks at the given sample: ``3`` is an integer even if
    the same field later shows up as ``3.5``.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, int):
        return TypeTag.INTEGER
    if isinstance(value, float):
        return TypeTag.INTEGER if value.is_integer() else TypeTag.DOUBLE
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, Sequence):
        return TypeTag.COLLECTION
    return TypeTag.OBJECT


def infer_schema(value: Any) -> SchemaNode:
    """Build the schema tree describing one raw JSON value."""
    tag = classify_value(value)
    if tag is TypeTag.OBJECT and isinstance(value, Mapping):
        return ObjectNode({str(key): infer_schema(item) for key, item in value.items()})
    if tag is TypeTag.COLLECTION:
        return ArrayNode(_infer_element_schema(value))
    return ScalarNode(tag)


def _infer_element_schema(values: Sequence[Any]) -> SchemaNode:
    if not values:
        return NULL_NODE
    if isinstance(values[0], Mapping):
        # Imported lazily: the extractor classifies its chosen values with infer_schema.
        from .representative_objects import extract_representative_object

        return extract_representative_object(values)
    return infer_schema(values[0])
