"""Shared model rendering constants."""

from __future__ import annotations

MODEL_FILE_SUFFIX = ".cs"

TYPES_SHEET_NAME = "Types"
TYPES_COLUMNS: tuple[str, ...] = ("Type", "Field", "JSON key", "Field type")
