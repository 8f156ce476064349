"""Schema store implementations."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from schema_learner.schema_management import (
    ObjectNode,
    SchemaDecodeError,
    dumps_schema,
    loads_schema,
)

SCHEMA_FILE_SUFFIX = ".schema.json"

_LOGGER = logging.getLogger(__name__)


class SchemaStoreError(Exception):
    """Raised when a schema cannot be persisted."""


class SchemaStore(Protocol):
    """Persistence contract for the last known schema of each type name."""

    def load(self, type_name: str) -> ObjectNode | None: ...

    def save(self, type_name: str, schema: ObjectNode) -> None: ...

    def type_names(self) -> tuple[str, ...]: ...


class FileSchemaStore:
    """Store keeping one ``<TypeName>.schema.json`` file per type name."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """Directory holding the schema files."""
        return self._directory

    def schema_path(self, type_name: str) -> Path:
        """Path of the schema file for ``type_name``."""
        return self._directory / f"{type_name}{SCHEMA_FILE_SUFFIX}"

    def load(self, type_name: str) -> ObjectNode | None:
        """Return the persisted schema, or ``None`` when missing or unreadable."""
        path = self.schema_path(type_name)
        if not path.exists():
            return None
        try:
            return loads_schema(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, SchemaDecodeError) as exc:
            _LOGGER.warning("Ignoring unreadable schema file %s: %s", path, exc)
            return None

    def save(self, type_name: str, schema: ObjectNode) -> None:
        """Atomically replace the schema file for ``type_name``.

        Raises:
          SchemaStoreError: If the directory or file cannot be written.
        """
        path = self.schema_path(type_name)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(
                dir=self._directory, prefix=f".{type_name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(handle, "w", encoding="utf-8") as stream:
                    stream.write(dumps_schema(schema))
                os.replace(temp_name, path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SchemaStoreError(f"Failed to write schema file {path}: {exc}") from exc

    def type_names(self) -> tuple[str, ...]:
        """Sorted type names that have a schema file."""
        if not self._directory.is_dir():
            return ()
        return tuple(
            sorted(
                path.name[: -len(SCHEMA_FILE_SUFFIX)]
                for path in self._directory.glob(f"*{SCHEMA_FILE_SUFFIX}")
                if path.is_file()
            )
        )


class InMemorySchemaStore:
    """Process-local store used for embedding and tests."""

    def __init__(self, schemas: dict[str, ObjectNode] | None = None) -> None:
        self._schemas: dict[str, ObjectNode] = dict(schemas or {})

    def load(self, type_name: str) -> ObjectNode | None:
        return self._schemas.get(type_name)

    def save(self, type_name: str, schema: ObjectNode) -> None:
        self._schemas[type_name] = schema

    def type_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._schemas))
