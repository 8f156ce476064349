"""Model emitter tests."""

from __future__ import annotations

from schema_learner.model_emission import (
    FieldType,
    FieldTypeKind,
    NestedType,
    emit_models,
    emit_type_definition,
)
from schema_learner.schema_management import ObjectNode, ScalarNode, TypeTag, infer_schema


def _schema(sample: dict) -> ObjectNode:
    schema = infer_schema(sample)
    assert isinstance(schema, ObjectNode)
    return schema


def test_scalar_fields_use_identifier_names_and_primitive_tags() -> None:
    emitted = emit_type_definition(
        "Order",
        _schema({"order_id": 1, "total": 9.5, "paid": True, "note": "x", "coupon": None}),
    )

    definition = emitted.definition
    assert definition.name == "Order"
    assert definition.field_names() == ("OrderId", "Total", "Paid", "Note", "Coupon")
    assert [field.json_key for field in definition.fields] == [
        "order_id",
        "total",
        "paid",
        "note",
        "coupon",
    ]
    assert [field.field_type.describe() for field in definition.fields] == [
        "integer",
        "double",
        "boolean",
        "string",
        "object",
    ]
    assert emitted.nested == ()


def test_object_fields_reference_nested_types_by_key() -> None:
    schema = _schema({"shipping_address": {"city": "Oslo"}})

    emitted = emit_type_definition("Order", schema)

    field = emitted.definition.fields[0]
    assert field.field_type == FieldType.of_named("ShippingAddress")
    assert emitted.nested == (
        NestedType(
            type_name="ShippingAddress",
            schema=ObjectNode({"city": ScalarNode(TypeTag.STRING)}),
        ),
    )


def test_array_of_object_fields_use_singular_type_names() -> None:
    schema = _schema({"line_items": [{"sku": "a"}, {"qty": 2}]})

    emitted = emit_type_definition("Order", schema)

    field = emitted.definition.fields[0]
    assert field.name == "LineItems"
    assert field.field_type.kind is FieldTypeKind.COLLECTION
    assert field.field_type.describe() == "collection of LineItem"
    assert emitted.nested[0].type_name == "LineItem"
    assert emitted.nested[0].schema.keys() == ("sku", "qty")


def test_array_of_scalar_fields_use_first_element_type() -> None:
    schema = _schema({"tags": ["a", 1], "scores": [1.5], "empty": []})

    emitted = emit_type_definition("Order", schema)

    assert [field.field_type.describe() for field in emitted.definition.fields] == [
        "collection of string",
        "collection of double",
        "collection of object",
    ]
    assert emitted.nested == ()


def test_nested_array_fields_emit_collections_of_collections() -> None:
    emitted = emit_type_definition("Grid", _schema({"cells": [[{"value": 1}]], "matrix": [[1]]}))

    assert [field.field_type.describe() for field in emitted.definition.fields] == [
        "collection of collection of Cell",
        "collection of collection of integer",
    ]
    assert [nested.type_name for nested in emitted.nested] == ["Cell"]


def test_emit_models_walks_nested_types_once_per_name() -> None:
    schema = _schema(
        {
            "id": 1,
            "customer": {"name": "Ada", "address": {"city": "Oslo"}},
            "shipping": {"address": {"zip": "0150"}},
            "items": [{"sku": "a", "product": {"title": "Pen"}}],
        }
    )

    definitions = emit_models("Order", schema)

    assert [definition.name for definition in definitions] == [
        "Order",
        "Customer",
        "Shipping",
        "Item",
        "Address",
        "Product",
    ]
    address = next(definition for definition in definitions if definition.name == "Address")
    assert address.field_names() == ("City", "Zip")


def test_emit_models_does_not_loop_on_self_named_fields() -> None:
    schema = _schema({"name": "root", "node": {"node": {"node": {"leaf": True}}}})

    definitions = emit_models("Node", schema)

    assert [definition.name for definition in definitions] == ["Node"]
    assert definitions[0].field_names() == ("Name", "Node")


def test_field_order_follows_schema_order() -> None:
    schema = _schema({"zeta": 1, "alpha": 2, "mid": 3})

    assert emit_type_definition("Letters", schema).definition.field_names() == (
        "Zeta",
        "Alpha",
        "Mid",
    )


def test_nested_keys_without_identifier_characters_fall_back_to_object() -> None:
    emitted = emit_type_definition("Shop", _schema({"!!!": {"a": 1}, "$$": [{"b": 2}]}))

    field_types = [field.field_type for field in emitted.definition.fields]
    assert field_types == [
        FieldType.of_primitive(TypeTag.OBJECT),
        FieldType.collection_of(FieldType.of_primitive(TypeTag.OBJECT)),
    ]
    assert emitted.nested == ()
