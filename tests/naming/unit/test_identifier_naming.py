"""Identifier naming tests."""

from __future__ import annotations

import pytest
from schema_learner.naming import to_identifier, to_singular, to_type_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("orders", "Orders"),
        ("order_items", "OrderItems"),
        ("shipping_address_line", "ShippingAddressLine"),
        ("userId", "UserId"),
        ("user-name", "Username"),
        ("$type", "type"),
        ("2fa_enabled", "2faEnabled"),
    ],
)
def test_to_identifier_capitalizes_word_starts_and_strips_symbols(raw: str, expected: str) -> None:
    assert to_identifier(raw) == expected


def test_to_identifier_returns_empty_string_for_symbol_only_keys() -> None:
    assert to_identifier("$$") == ""
    assert to_identifier("-") == ""


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("categories", "category"),
        ("classes", "class"),
        ("items", "item"),
        ("address", "address"),
        ("order", "order"),
    ],
)
def test_to_singular_applies_suffix_heuristics(word: str, expected: str) -> None:
    assert to_singular(word) == expected


def test_to_singular_drops_trailing_s_of_non_plural_words() -> None:
    assert to_singular("status") == "statu"


def test_to_singular_leaves_irregular_plurals_unchanged() -> None:
    assert to_singular("children") == "children"
    assert to_singular("data") == "data"


def test_to_type_name_singularizes_collections_only() -> None:
    assert to_type_name("line_items") == "LineItems"
    assert to_type_name("line_items", collection=True) == "LineItem"
    assert to_type_name("categories", collection=True) == "Category"
