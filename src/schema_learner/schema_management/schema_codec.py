"""Persisted JSON form of learned schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .schema_models import (
    NULL_NODE,
    SCALAR_TAGS,
    ArrayNode,
    ObjectNode,
    ScalarNode,
    SchemaNode,
    TypeTag,
)

_TAGS_BY_VALUE = {tag.value: tag for tag in SCALAR_TAGS}


class SchemaDecodeError(Exception):
    """Raised when persisted schema text cannot be turned back into a schema."""


def encode_schema(node: SchemaNode) -> Any:
    """Return the JSON-compatible form of a schema.

    Objects become JSON objects, arrays a one-element JSON array holding the
    element schema, and scalars their tag name (``null`` for the null tag).
    """
    if isinstance(node, ObjectNode):
        return {key: encode_schema(child) for key, child in node.fields.items()}
    if isinstance(node, ArrayNode):
        return [encode_schema(node.element)]
    if node.is_null:
        return None
    return node.kind.value


def decode_schema(value: Any) -> SchemaNode:
    """Rebuild a schema from its JSON-compatible form."""
    if value is None:
        return NULL_NODE
    if isinstance(value, Mapping):
        return ObjectNode({str(key): decode_schema(child) for key, child in value.items()})
    if isinstance(value, list):
        if len(value) > 1:
            raise SchemaDecodeError("Array schemas must hold at most one element schema.")
        return ArrayNode(decode_schema(value[0]) if value else NULL_NODE)
    if isinstance(value, str):
        tag = _TAGS_BY_VALUE.get(value)
        if tag is None or tag is TypeTag.NULL:
            raise SchemaDecodeError(f"Unknown scalar type tag: {value!r}")
        return ScalarNode(tag)
    raise SchemaDecodeError(f"Unsupported schema segment: {value!r}")


def dumps_schema(node: ObjectNode) -> str:
    """Serialize an object schema to indented JSON text."""
    return json.dumps(encode_schema(node), indent=2) + "\n"


def loads_schema(text: str) -> ObjectNode:
    """Parse schema text whose root must be an object schema."""
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaDecodeError(f"Invalid schema JSON: {exc}") from exc
    node = decode_schema(root)
    if not isinstance(node, ObjectNode):
        raise SchemaDecodeError("Schema root must be a JSON object.")
    return node
