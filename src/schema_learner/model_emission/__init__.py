"""Model emission exports."""

from .model_emitter import emit_models, emit_type_definition
from .type_definitions import (
    EmittedType,
    FieldDefinition,
    FieldType,
    FieldTypeKind,
    NestedType,
    TypeDefinition,
)

__all__ = [
    "EmittedType",
    "FieldDefinition",
    "FieldType",
    "FieldTypeKind",
    "NestedType",
    "TypeDefinition",
    "emit_models",
    "emit_type_definition",
]
