"""Decoding of raw payloads into named samples."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from schema_learner.naming import to_type_name
from schema_learner.schema_management import (
    ObjectNode,
    extract_representative_object,
    infer_schema,
)

from .sample_models import NamedSample

JSON_CONTENT_TYPE_MARKERS = ("application/json", "+json")

_LOGGER = logging.getLogger(__name__)


class SampleDecodeError(Exception):
    """Raised when a payload file cannot be read or decoded."""


def is_json_content_type(content_type: str | None) -> bool:
    """Whether a content type header announces a JSON body."""
    if content_type is None:
        return True
    lowered = content_type.lower()
    return any(marker in lowered for marker in JSON_CONTENT_TYPE_MARKERS)


def decode_json_payload(body: bytes | str | None, content_type: str | None = None) -> Any | None:
    """Decode a JSON body, returning ``None`` when it should be skipped.

    Bodies announced with a non-JSON content type, empty bodies and bodies that
    are not valid JSON are skipped.
    """
    if body is None or not is_json_content_type(content_type):
        return None
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
    except UnicodeDecodeError:
        _LOGGER.warning("Skipping payload that is not valid UTF-8.")
        return None
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Skipping malformed JSON payload: %s", exc)
        return None


def read_payload_file(path: Path | str) -> Any:
    """Read and decode one JSON payload file.

    Raises:
      SampleDecodeError: If the file is missing, unreadable or not valid JSON.
    """
    payload_path = Path(path)
    try:
        text = payload_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SampleDecodeError(f"Failed to read payload file {payload_path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SampleDecodeError(f"Invalid JSON in payload file {payload_path}: {exc}") from exc


def split_root_payload(payload: Any) -> tuple[NamedSample, ...]:
    """Route every top-level field of a root object to its own named sample.

    Object values are filed under ``to_type_name(key)`` and arrays holding at
    least one object under the singular form of the key, represented by the
    array's representative object. Scalars, nulls and arrays without objects do
    not describe a type and are skipped, as are keys yielding an empty name.
    """
    if not isinstance(payload, Mapping):
        _LOGGER.debug("Skipping root payload of type %s.", type(payload).__name__)
        return ()
    samples: list[NamedSample] = []
    for raw_key, value in payload.items():
        key = str(raw_key)
        sample = _to_named_sample(key, value)
        if sample is None:
            _LOGGER.debug("Skipping root field %r without an object shape.", key)
            continue
        samples.append(sample)
    return tuple(samples)


def _to_named_sample(key: str, value: Any) -> NamedSample | None:
    schema: ObjectNode
    if isinstance(value, Mapping):
        type_name = to_type_name(key)
        inferred = infer_schema(value)
        assert isinstance(inferred, ObjectNode)
        schema = inferred
    elif isinstance(value, Sequence) and not isinstance(value, str):
        if not any(isinstance(element, Mapping) for element in value):
            return None
        type_name = to_type_name(key, collection=True)
        schema = extract_representative_object(value)
    else:
        return None
    if not type_name:
        return None
    return NamedSample(type_name=type_name, source_key=key, schema=schema)
