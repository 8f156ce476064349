"""Cumulative schema merging service."""

from __future__ import annotations

from .schema_models import ArrayNode, ObjectNode, ScalarNode, SchemaNode


class SchemaMergeError(Exception):
    """Raised when a merge is requested for schemas that are not object-shaped."""


def merge_schemas(existing: SchemaNode, incoming: SchemaNode) -> ObjectNode:
    """Union two object schemas, keeping the existing schema authoritative.

    Keys only present in ``incoming`` are appended after the existing keys.
    Shared keys are merged by :func:`merge_field_schemas`. The operation is
    idempotent but not commutative: on a hard type conflict the existing
    field schema wins.

    Raises:
      SchemaMergeError: If either side is not an object schema.
    """
    if not isinstance(existing, ObjectNode) or not isinstance(incoming, ObjectNode):
        raise SchemaMergeError("Only object schemas can be merged at the root.")
    return _merge_objects(existing, incoming)


def merge_field_schemas(existing: SchemaNode, incoming: SchemaNode) -> SchemaNode:
    """Merge two schemas observed for the same field."""
    if isinstance(existing, ObjectNode) and isinstance(incoming, ObjectNode):
        return _merge_objects(existing, incoming)
    if isinstance(existing, ArrayNode) and isinstance(incoming, ArrayNode):
        return ArrayNode(merge_field_schemas(existing.element, incoming.element))
    if _is_null(existing) and not _is_null(incoming):
        return incoming
    return existing


def _merge_objects(existing: ObjectNode, incoming: ObjectNode) -> ObjectNode:
    merged: dict[str, SchemaNode] = dict(existing.fields)
    for key, incoming_field in incoming.fields.items():
        current = merged.get(key)
        merged[key] = (
            incoming_field if current is None else merge_field_schemas(current, incoming_field)
        )
    return ObjectNode(merged)


def _is_null(node: SchemaNode) -> bool:
    return isinstance(node, ScalarNode) and node.is_null
