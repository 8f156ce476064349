"""Learning run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_learner.model_emission import TypeDefinition


@dataclass(frozen=True)
class ObservationOutcome:
    """Result of observing one root payload or one named sample."""

    type_definitions: tuple[TypeDefinition, ...]
    unsaved_type_names: tuple[str, ...] = ()

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(definition.name for definition in self.type_definitions)


@dataclass(frozen=True)
class ObservationRequest:
    """Input contract for observing payload files."""

    config_path: str
    input_paths: tuple[str, ...]
    output_dir: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class TopicObservationRequest:
    """Input contract for observing a Kafka topic."""

    config_path: str
    output_dir: str | None = None
    max_messages: int | None = None


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for regenerating models from stored schemas."""

    config_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class WorkbookExportRequest:
    """Input contract for exporting the model summary workbook."""

    config_path: str
    output_path: str


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    observed_payloads: int
    skipped_payloads: int
    type_names: tuple[str, ...]
    written_paths: tuple[Path, ...]
    unsaved_type_names: tuple[str, ...] = ()
