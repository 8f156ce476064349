"""Naming exports."""

from .identifier_naming import to_identifier, to_singular, to_type_name

__all__ = [
    "to_identifier",
    "to_singular",
    "to_type_name",
]
