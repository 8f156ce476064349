"""Configuration loader tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from schema_learner.configuration import (
    DEFAULT_USINGS,
    LoggingSettings,
    resolve_log_level,
)
from schema_learner.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
output:
  directory: models
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.output.directory == (tmp_path / "models").resolve()
    assert configuration.output.schema_directory == configuration.output.directory
    assert configuration.rendering.namespace is None
    assert configuration.rendering.usings == DEFAULT_USINGS
    assert configuration.rendering.required_members is True
    assert configuration.kafka is None
    assert configuration.logging.level == "INFO"


def test_loads_full_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
output:
  directory: /srv/models
  schema_directory: schemas
rendering:
  namespace: Shop.Models
  usings: System.Text.Json
  required_members: false
kafka:
  bootstrap_servers: "broker-1:9092, broker-2:9092"
  topic: api-responses
  group_id: schema-learner
  security:
    security.protocol: SASL_SSL
  timeout_seconds: 5
  poll_interval_ms: 100
  auto_offset_reset: EARLIEST
logging:
  level: debug
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.output.directory == Path("/srv/models")
    assert configuration.output.schema_directory == (tmp_path / "schemas").resolve()
    assert configuration.rendering.namespace == "Shop.Models"
    assert configuration.rendering.usings == ("System.Text.Json",)
    assert configuration.rendering.required_members is False
    assert configuration.kafka is not None
    assert configuration.kafka.bootstrap_servers == ("broker-1:9092", "broker-2:9092")
    assert configuration.kafka.topic == "api-responses"
    assert configuration.kafka.group_id == "schema-learner"
    assert configuration.kafka.security == {"security.protocol": "SASL_SSL"}
    assert configuration.kafka.timeout_seconds == 5
    assert configuration.kafka.poll_interval_ms == 100
    assert configuration.kafka.auto_offset_reset == "earliest"
    assert configuration.logging.level == "DEBUG"


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "output": {"directory": "out"},
                "kafka": {"bootstrap_servers": ["localhost:9092"], "topic": "t"},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.kafka is not None
    assert configuration.kafka.timeout_seconds == 60
    assert configuration.kafka.poll_interval_ms == 500
    assert configuration.kafka.auto_offset_reset == "latest"


def test_optional_placeholders_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
output:
  directory: out
  schema_directory: "<OPTIONAL>"
rendering:
  namespace: "<OPTIONAL>"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.output.schema_directory == configuration.output.directory
    assert configuration.rendering.namespace is None


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "output: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(config_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- output\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_output_section_is_required(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "rendering:\n  namespace: X\n")

    with pytest.raises(ConfigurationError, match="'output' is required"):
        load_configuration(config_path)


def test_required_placeholder_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", 'output:\n  directory: "<REQUIRED>"\n'
    )

    with pytest.raises(ConfigurationError, match="output.directory still holds"):
        load_configuration(config_path)


def test_required_members_must_be_boolean(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        "output:\n  directory: out\nrendering:\n  required_members: 'yes'\n",
    )

    with pytest.raises(ConfigurationError, match="required_members must be a boolean"):
        load_configuration(config_path)


def test_kafka_section_requires_bootstrap_servers(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "output:\n  directory: out\nkafka:\n  topic: t\n"
    )

    with pytest.raises(ConfigurationError, match="bootstrap_servers is required"):
        load_configuration(config_path)


def test_kafka_timeout_must_be_positive(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        "output:\n  directory: out\nkafka:\n"
        "  bootstrap_servers: localhost:9092\n  topic: t\n  timeout_seconds: 0\n",
    )

    with pytest.raises(ConfigurationError, match="timeout_seconds must be greater than zero"):
        load_configuration(config_path)


def test_unknown_log_level_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "output:\n  directory: out\nlogging:\n  level: chatty\n"
    )

    with pytest.raises(ConfigurationError, match="logging.level must be one of"):
        load_configuration(config_path)


def test_resolve_log_level_maps_names_to_logging_levels() -> None:
    assert resolve_log_level(LoggingSettings(level="WARNING")) == logging.WARNING
    assert resolve_log_level(LoggingSettings()) == logging.INFO
