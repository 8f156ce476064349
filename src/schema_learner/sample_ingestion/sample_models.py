"""Sample ingestion entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schema_learner.schema_management import ObjectNode


@dataclass(frozen=True)
class NamedSample:
    """One observation routed to the type it belongs to."""

    type_name: str
    source_key: str
    schema: ObjectNode


@dataclass(frozen=True)
class ObservedPayload:
    """Decoded root payload together with where it came from."""

    origin: str
    payload: Any
