"""Learning run use-case services."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from confluent_kafka import KafkaException

from schema_learner.configuration import (
    Configuration,
    ConfigurationError,
    LoggingSettings,
    load_configuration,
    resolve_log_level,
)
from schema_learner.model_emission import TypeDefinition
from schema_learner.model_rendering import RenderError, write_model_files, write_model_workbook
from schema_learner.sample_ingestion import (
    ObservedPayload,
    SampleDecodeError,
    TopicReadError,
    TopicSampleReader,
    decode_json_payload,
    read_payload_file,
)
from schema_learner.schema_storage import FileSchemaStore

from .learning_session import LearningSession, render_stored_models
from .run_contracts import (
    ObservationRequest,
    RenderRequest,
    RunOutcome,
    TopicObservationRequest,
    WorkbookExportRequest,
)

PACKAGE_LOGGER_NAME = "schema_learner"

_LOGGER = logging.getLogger(__name__)


class ObservationRunError(Exception):
    """Raised when a learning run cannot be completed."""


@dataclass(frozen=True)
class _RunTargets:
    """Resolved configuration and output locations for one run."""

    configuration: Configuration
    model_directory: Path
    store: FileSchemaStore


def execute_observation_run(request: ObservationRequest) -> RunOutcome:
    """Observe every payload file, update stored schemas and write models."""
    targets = _load_run_targets(request.config_path, request.output_dir)
    payloads = [_read_observed_payload(path, request.content_type) for path in request.input_paths]
    return _observe_and_render(targets, payloads)


def execute_topic_observation_run(
    request: TopicObservationRequest,
    *,
    reader_factory: Callable[..., TopicSampleReader] | None = None,
) -> RunOutcome:
    """Observe JSON messages from the configured Kafka topic."""
    targets = _load_run_targets(request.config_path, request.output_dir)
    kafka_settings = targets.configuration.kafka
    if kafka_settings is None:
        raise ObservationRunError("observe-topic requires a kafka section in the configuration.")
    resolved_reader_factory = reader_factory or TopicSampleReader
    try:
        reader = resolved_reader_factory(kafka_settings=kafka_settings)
        payloads = list(reader.consume(max_messages=request.max_messages))
    except (TopicReadError, KafkaException, ValueError) as exc:
        raise ObservationRunError(str(exc)) from exc
    return _observe_and_render(targets, payloads)


def execute_render_run(request: RenderRequest) -> RunOutcome:
    """Regenerate model files for every stored schema."""
    targets = _load_run_targets(request.config_path, request.output_dir)
    definitions = render_stored_models(targets.store)
    written = _write_models(targets, definitions)
    return RunOutcome(
        observed_payloads=0,
        skipped_payloads=0,
        type_names=tuple(definition.name for definition in definitions),
        written_paths=written,
    )


def execute_workbook_export(request: WorkbookExportRequest) -> RunOutcome:
    """Write the model summary workbook for every stored schema."""
    targets = _load_run_targets(request.config_path, None)
    definitions = render_stored_models(targets.store)
    try:
        workbook_path = write_model_workbook(definitions, request.output_path)
    except OSError as exc:
        raise ObservationRunError(str(exc)) from exc
    return RunOutcome(
        observed_payloads=0,
        skipped_payloads=0,
        type_names=tuple(definition.name for definition in definitions),
        written_paths=(workbook_path,),
    )


def _load_run_targets(config_path: str, output_dir: str | None) -> _RunTargets:
    try:
        configuration = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise ObservationRunError(str(exc)) from exc
    _apply_log_level(configuration.logging)
    output = configuration.output
    model_directory = output.directory
    schema_directory = output.schema_directory
    if output_dir:
        model_directory = Path(output_dir).resolve()
        if output.schema_directory == output.directory:
            schema_directory = model_directory
    return _RunTargets(
        configuration=configuration,
        model_directory=model_directory,
        store=FileSchemaStore(schema_directory),
    )


def _apply_log_level(settings: LoggingSettings) -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    # An explicit level (e.g. from --verbose) takes precedence over the file.
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(resolve_log_level(settings))


def _read_observed_payload(path: str, content_type: str | None) -> ObservedPayload | None:
    if content_type is not None:
        try:
            body = Path(path).read_bytes()
        except OSError as exc:
            _LOGGER.warning("Skipping payload: Failed to read payload file %s: %s", path, exc)
            return None
        payload = decode_json_payload(body, content_type)
        return None if payload is None else ObservedPayload(origin=path, payload=payload)
    try:
        return ObservedPayload(origin=path, payload=read_payload_file(path))
    except SampleDecodeError as exc:
        _LOGGER.warning("Skipping payload: %s", exc)
        return None


def _observe_and_render(
    targets: _RunTargets, payloads: Iterable[ObservedPayload | None]
) -> RunOutcome:
    session = LearningSession(targets.store)
    latest_definitions: dict[str, TypeDefinition] = {}
    unsaved: list[str] = []
    observed = 0
    skipped = 0
    for observed_payload in payloads:
        if observed_payload is None:
            skipped += 1
            continue
        outcome = session.observe_payload(observed_payload.payload)
        if not outcome.type_definitions:
            _LOGGER.info("No object-shaped fields found in %s.", observed_payload.origin)
        observed += 1
        for definition in outcome.type_definitions:
            latest_definitions[definition.name] = definition
        for name in outcome.unsaved_type_names:
            if name not in unsaved:
                unsaved.append(name)
        _LOGGER.info(
            "Observed %s: %s", observed_payload.origin, ", ".join(outcome.type_names) or "-"
        )

    definitions = tuple(latest_definitions.values())
    written = _write_models(targets, definitions)
    return RunOutcome(
        observed_payloads=observed,
        skipped_payloads=skipped,
        type_names=tuple(definition.name for definition in definitions),
        written_paths=written,
        unsaved_type_names=tuple(unsaved),
    )


def _write_models(targets: _RunTargets, definitions: Sequence[TypeDefinition]) -> tuple[Path, ...]:
    try:
        return write_model_files(
            definitions, targets.model_directory, targets.configuration.rendering
        )
    except RenderError as exc:
        raise ObservationRunError(str(exc)) from exc
