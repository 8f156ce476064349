"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-learner.
# Replace every <REQUIRED> placeholder before running observe, observe-topic or render.
# Replace <OPTIONAL> placeholders only when your setup needs them.

output:
  # Directory receiving one generated model file per learned type.
  directory: "<REQUIRED>"
  # Directory holding the persisted <TypeName>.schema.json files.
  # Defaults to output.directory.
  schema_directory: "<OPTIONAL>"

rendering:
  namespace: "<OPTIONAL>"
  # Using directives written at the top of every model file.
  usings:
    - "MongoDB.Bson"
    - "MongoDB.Bson.Serialization.Attributes"
    - "System.Collections.Generic"
  required_members: true

# Only needed by observe-topic.
# kafka:
#   bootstrap_servers:
#     - "<REQUIRED>"
#   topic: "<REQUIRED>"
#   group_id: "<OPTIONAL>"
#   security:
#     sasl.username: "<OPTIONAL>"
#     sasl.password: "<OPTIONAL>"
#     security.protocol: "<OPTIONAL>"
#     sasl.mechanisms: "<OPTIONAL>"
#   timeout_seconds: "<OPTIONAL>"
#   poll_interval_ms: "<OPTIONAL>"
#   auto_offset_reset: "<OPTIONAL>"

logging:
  # One of DEBUG, INFO, WARNING, ERROR.
  level: "INFO"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
