"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_USINGS: tuple[str, ...] = (
    "MongoDB.Bson",
    "MongoDB.Bson.Serialization.Attributes",
    "System.Collections.Generic",
)


@dataclass(frozen=True)
class OutputSettings:
    """Locations of rendered models and persisted schemas."""

    directory: Path
    schema_directory: Path


@dataclass(frozen=True)
class RenderingSettings:
    """C# model rendering options."""

    namespace: str | None = None
    usings: tuple[str, ...] = DEFAULT_USINGS
    required_members: bool = True


@dataclass(frozen=True)
class KafkaSettings:
    """Kafka consumer configuration for topic observation."""

    bootstrap_servers: tuple[str, ...]
    topic: str
    group_id: str | None
    security: Mapping[str, object]
    timeout_seconds: int
    poll_interval_ms: int
    auto_offset_reset: str


@dataclass(frozen=True)
class LoggingSettings:
    """Log verbosity for CLI runs."""

    level: str = "INFO"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    output: OutputSettings
    rendering: RenderingSettings
    kafka: KafkaSettings | None
    logging: LoggingSettings
