"""Type definition emission from learned schemas."""

from __future__ import annotations

from collections import deque

from schema_learner.naming import to_identifier, to_type_name
from schema_learner.schema_management import (
    ArrayNode,
    ObjectNode,
    SchemaNode,
    TypeTag,
    merge_schemas,
)

from .type_definitions import EmittedType, FieldDefinition, FieldType, NestedType, TypeDefinition


def emit_type_definition(type_name: str, schema: ObjectNode) -> EmittedType:
    """Emit the definition of one object schema.

    Nested object fields and array-of-object fields are referenced by name and
    returned as :class:`NestedType` entries; they are not emitted here.
    """
    fields: list[FieldDefinition] = []
    nested: list[NestedType] = []
    for key, node in schema.fields.items():
        field_type = _field_type(key, node, nested)
        fields.append(FieldDefinition(name=to_identifier(key), json_key=key, field_type=field_type))
    return EmittedType(
        definition=TypeDefinition(name=type_name, fields=tuple(fields)),
        nested=tuple(nested),
    )


def emit_models(type_name: str, schema: ObjectNode) -> tuple[TypeDefinition, ...]:
    """Emit the definition of ``schema`` and of every type nested inside it.

    Each type name is emitted once. When a name is reached again before it was
    emitted, the schemas are merged; once emitted, later occurrences are
    ignored.
    """
    pending: dict[str, ObjectNode] = {type_name: schema}
    queue: deque[str] = deque([type_name])
    emitted: dict[str, TypeDefinition] = {}
    while queue:
        current_name = queue.popleft()
        result = emit_type_definition(current_name, pending.pop(current_name))
        emitted[current_name] = result.definition
        for nested in result.nested:
            if nested.type_name in emitted:
                continue
            if nested.type_name in pending:
                pending[nested.type_name] = merge_schemas(pending[nested.type_name], nested.schema)
                continue
            pending[nested.type_name] = nested.schema
            queue.append(nested.type_name)
    return tuple(emitted.values())


def _field_type(key: str, node: SchemaNode, nested: list[NestedType]) -> FieldType:
    if isinstance(node, ObjectNode):
        nested_name = to_type_name(key)
        if not nested_name:
            return FieldType.of_primitive(TypeTag.OBJECT)
        nested.append(NestedType(type_name=nested_name, schema=node))
        return FieldType.of_named(nested_name)
    if isinstance(node, ArrayNode):
        return FieldType.collection_of(_element_type(key, node.element, nested))
    if node.is_null:
        return FieldType.of_primitive(TypeTag.OBJECT)
    return FieldType.of_primitive(node.kind)


def _element_type(key: str, element: SchemaNode, nested: list[NestedType]) -> FieldType:
    if isinstance(element, ObjectNode):
        nested_name = to_type_name(key, collection=True)
        if not nested_name:
            return FieldType.of_primitive(TypeTag.OBJECT)
        nested.append(NestedType(type_name=nested_name, schema=element))
        return FieldType.of_named(nested_name)
    if isinstance(element, ArrayNode):
        return FieldType.collection_of(_element_type(key, element.element, nested))
    if element.is_null:
        return FieldType.of_primitive(TypeTag.OBJECT)
    return FieldType.of_primitive(element.kind)
