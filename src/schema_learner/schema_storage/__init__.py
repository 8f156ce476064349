"""Schema storage exports."""

from .schema_store import (
    SCHEMA_FILE_SUFFIX,
    FileSchemaStore,
    InMemorySchemaStore,
    SchemaStore,
    SchemaStoreError,
)
from .type_name_locks import TypeNameLocks

__all__ = [
    "SCHEMA_FILE_SUFFIX",
    "FileSchemaStore",
    "InMemorySchemaStore",
    "SchemaStore",
    "SchemaStoreError",
    "TypeNameLocks",
]
