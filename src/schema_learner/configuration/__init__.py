"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_log_level
from .runtime_settings import (
    DEFAULT_USINGS,
    Configuration,
    KafkaSettings,
    LoggingSettings,
    OutputSettings,
    RenderingSettings,
)

__all__ = [
    "Configuration",
    "KafkaSettings",
    "LoggingSettings",
    "OutputSettings",
    "RenderingSettings",
    "DEFAULT_USINGS",
    "ConfigurationError",
    "load_configuration",
    "resolve_log_level",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
