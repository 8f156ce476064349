"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_USINGS,
    Configuration,
    KafkaSettings,
    LoggingSettings,
    OutputSettings,
    RenderingSettings,
)

REQUIRED_PLACEHOLDER = "<REQUIRED>"
OPTIONAL_PLACEHOLDER = "<OPTIONAL>"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    output = _parse_output_section(parsed.get("output"), base_path)
    rendering = _parse_rendering_section(parsed.get("rendering"))
    kafka_section = parsed.get("kafka")
    kafka = None if kafka_section is None else _parse_kafka_section(kafka_section)
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(
        path=path,
        output=output,
        rendering=rendering,
        kafka=kafka,
        logging=logging_settings,
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _require_mapping(value, "output")
    directory = _resolve_path(
        base_path, _require_non_empty_string(section.get("directory"), "output.directory")
    )
    schema_directory_raw = _optional_string(
        section.get("schema_directory"), "output.schema_directory"
    )
    schema_directory = (
        _resolve_path(base_path, schema_directory_raw) if schema_directory_raw else directory
    )
    return OutputSettings(directory=directory, schema_directory=schema_directory)


def _parse_rendering_section(value: Any) -> RenderingSettings:
    if value is None:
        return RenderingSettings()
    section = _require_mapping(value, "rendering")
    namespace = _optional_string(section.get("namespace"), "rendering.namespace")
    usings_raw = section.get("usings")
    usings = (
        DEFAULT_USINGS
        if usings_raw is None
        else _normalize_string_sequence(usings_raw, "rendering.usings")
    )
    required_members = section.get("required_members", True)
    if not isinstance(required_members, bool):
        raise ConfigurationError("rendering.required_members must be a boolean.")
    return RenderingSettings(
        namespace=namespace,
        usings=usings,
        required_members=required_members,
    )


def _parse_kafka_section(value: Any) -> KafkaSettings:
    section = _require_mapping(value, "kafka")
    bootstrap_servers = _normalize_bootstrap_servers(section.get("bootstrap_servers"))
    topic = _require_non_empty_string(section.get("topic"), "kafka.topic")
    group_id = _optional_string(section.get("group_id"), "kafka.group_id")
    security = section.get("security") or {}
    if not isinstance(security, Mapping):
        raise ConfigurationError("kafka.security must be a mapping.")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 60), "kafka.timeout_seconds"
    )
    poll_interval_ms = _require_positive_int(
        section.get("poll_interval_ms", 500), "kafka.poll_interval_ms"
    )
    auto_offset_reset_raw = section.get("auto_offset_reset", "latest")
    auto_offset_reset = _require_non_empty_string(
        auto_offset_reset_raw, "kafka.auto_offset_reset"
    ).lower()
    return KafkaSettings(
        bootstrap_servers=bootstrap_servers,
        topic=topic,
        group_id=group_id,
        security=dict(security),
        timeout_seconds=timeout_seconds,
        poll_interval_ms=poll_interval_ms,
        auto_offset_reset=auto_offset_reset,
    )


def _parse_logging_section(value: Any) -> LoggingSettings:
    if value is None:
        return LoggingSettings()
    section = _require_mapping(value, "logging")
    level = _require_non_empty_string(section.get("level", "INFO"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _normalize_bootstrap_servers(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("kafka.bootstrap_servers is required.")
    servers: list[str] = []
    if isinstance(value, str):
        servers = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("kafka.bootstrap_servers entries must be strings.")
            stripped = item.strip()
            if stripped:
                servers.append(stripped)
    else:
        raise ConfigurationError("kafka.bootstrap_servers must be a string or list of strings.")
    if not servers:
        raise ConfigurationError("kafka.bootstrap_servers must contain at least one server.")
    return tuple(servers)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == REQUIRED_PLACEHOLDER:
        raise ConfigurationError(
            f"{field_name} still holds the {REQUIRED_PLACEHOLDER} placeholder."
        )
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def resolve_log_level(settings: LoggingSettings) -> int:
    """Map configured level names onto :mod:`logging` levels."""
    return int(getattr(logging, settings.level))
