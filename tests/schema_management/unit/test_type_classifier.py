"""Type classifier tests."""

from __future__ import annotations

from typing import Any

import pytest
from schema_learner.schema_management import (
    NULL_NODE,
    ArrayNode,
    ObjectNode,
    ScalarNode,
    TypeTag,
    classify_value,
    infer_schema,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("abc", TypeTag.STRING),
        ("", TypeTag.STRING),
        (3, TypeTag.INTEGER),
        (-7, TypeTag.INTEGER),
        (3.0, TypeTag.INTEGER),
        (3.5, TypeTag.DOUBLE),
        (True, TypeTag.BOOLEAN),
        (False, TypeTag.BOOLEAN),
        ([1, 2], TypeTag.COLLECTION),
        ([], TypeTag.COLLECTION),
        ({"a": 1}, TypeTag.OBJECT),
        (None, TypeTag.NULL),
    ],
)
def test_classify_value_uses_single_sample(value: Any, expected: TypeTag) -> None:
    assert classify_value(value) is expected


def test_infer_schema_builds_nested_object_schema() -> None:
    schema = infer_schema({"id": 1, "customer": {"name": "Ada", "vip": False}, "note": None})

    assert schema == ObjectNode(
        {
            "id": ScalarNode(TypeTag.INTEGER),
            "customer": ObjectNode(
                {"name": ScalarNode(TypeTag.STRING), "vip": ScalarNode(TypeTag.BOOLEAN)}
            ),
            "note": NULL_NODE,
        }
    )


def test_infer_schema_uses_representative_object_for_arrays_of_objects() -> None:
    schema = infer_schema([{"sku": "a"}, {"qty": 2}])

    assert schema == ArrayNode(
        ObjectNode({"sku": ScalarNode(TypeTag.STRING), "qty": ScalarNode(TypeTag.INTEGER)})
    )


def test_infer_schema_uses_first_element_for_scalar_arrays() -> None:
    assert infer_schema([1.5, 2]) == ArrayNode(ScalarNode(TypeTag.DOUBLE))
    assert infer_schema(["x", 1]) == ArrayNode(ScalarNode(TypeTag.STRING))


def test_infer_schema_marks_empty_array_elements_as_null() -> None:
    assert infer_schema([]) == ArrayNode(NULL_NODE)


def test_infer_schema_supports_nested_arrays() -> None:
    assert infer_schema([[1, 2], [3]]) == ArrayNode(ArrayNode(ScalarNode(TypeTag.INTEGER)))


def test_scalar_node_rejects_collection_tag() -> None:
    with pytest.raises(ValueError):
        ScalarNode(TypeTag.COLLECTION)
