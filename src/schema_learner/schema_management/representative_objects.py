"""Representative-object extraction for arrays of JSON objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .schema_models import ObjectNode
from .type_classifier import infer_schema


def collect_object_keys(elements: Iterable[Any]) -> list[str]:
    """Union of keys across all object elements, in first-seen order."""
    keys: dict[str, None] = {}
    for element in elements:
        if isinstance(element, Mapping):
            for key in element:
                keys.setdefault(str(key), None)
    return list(keys)


def select_representative_values(elements: Iterable[Any]) -> dict[str, Any]:
    """Synthesize one raw object standing in for every object in ``elements``.

    Each key takes its value from the first element that carries it, so a
    field's type is pinned by the earliest element that has the field.
    Non-object elements are ignored.
    """
    objects = [element for element in elements if isinstance(element, Mapping)]
    representative: dict[str, Any] = {}
    for key in collect_object_keys(objects):
        sample = None
        for element in objects:
            if key in element:
                sample = element[key]
                break
        representative[key] = sample
    return representative


def extract_representative_object(elements: Iterable[Any]) -> ObjectNode:
    """Schema of the representative object of ``elements``."""
    representative = select_representative_values(elements)
    return ObjectNode({key: infer_schema(value) for key, value in representative.items()})
