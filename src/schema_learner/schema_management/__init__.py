"""Schema management exports."""

from .representative_objects import (
    collect_object_keys,
    extract_representative_object,
    select_representative_values,
)
from .schema_codec import (
    SchemaDecodeError,
    decode_schema,
    dumps_schema,
    encode_schema,
    loads_schema,
)
from .schema_merging import SchemaMergeError, merge_field_schemas, merge_schemas
from .schema_models import NULL_NODE, ArrayNode, ObjectNode, ScalarNode, SchemaNode, TypeTag
from .type_classifier import classify_value, infer_schema

__all__ = [
    "ArrayNode",
    "NULL_NODE",
    "ObjectNode",
    "ScalarNode",
    "SchemaNode",
    "TypeTag",
    "SchemaDecodeError",
    "SchemaMergeError",
    "classify_value",
    "collect_object_keys",
    "decode_schema",
    "dumps_schema",
    "encode_schema",
    "extract_representative_object",
    "infer_schema",
    "loads_schema",
    "merge_field_schemas",
    "merge_schemas",
    "select_representative_values",
]
