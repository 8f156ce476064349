"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_learner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from schema_learner.learning_run import (
    ObservationRequest,
    ObservationRunError,
    RenderRequest,
    RunOutcome,
    TopicObservationRequest,
    WorkbookExportRequest,
    execute_observation_run,
    execute_render_run,
    execute_topic_observation_run,
    execute_workbook_export,
)

PACKAGE_LOGGER_NAME = "schema_learner"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-learner")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Learn cumulative schemas from JSON payloads and generate typed models."""
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT, stream=sys.stderr)
    if verbose:
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="observe")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--input",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="JSON payload file to observe; repeat for several files",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory overriding output.directory",
)
@click.option(
    "--content-type",
    "content_type",
    required=False,
    help="Content type of the payload files; non-JSON types are skipped",
)
def observe(
    config_path: str,
    input_paths: tuple[str, ...],
    output_dir: str | None,
    content_type: str | None,
) -> None:
    """Learn from JSON payload files and regenerate the affected models."""
    try:
        outcome = execute_observation_run(
            ObservationRequest(
                config_path=config_path,
                input_paths=tuple(input_paths),
                output_dir=output_dir,
                content_type=content_type,
            )
        )
    except ObservationRunError as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


@cli.command(name="observe-topic")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file with a kafka section",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory overriding output.directory",
)
@click.option(
    "--max-messages",
    "max_messages",
    required=False,
    type=click.IntRange(min=1),
    help="Stop after this many decoded messages",
)
def observe_topic(config_path: str, output_dir: str | None, max_messages: int | None) -> None:
    """Learn from JSON messages consumed from the configured Kafka topic."""
    try:
        outcome = execute_topic_observation_run(
            TopicObservationRequest(
                config_path=config_path,
                output_dir=output_dir,
                max_messages=max_messages,
            )
        )
    except ObservationRunError as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


@cli.command(name="render")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory overriding output.directory",
)
def render(config_path: str, output_dir: str | None) -> None:
    """Regenerate model files for every stored schema."""
    try:
        outcome = execute_render_run(RenderRequest(config_path=config_path, output_dir=output_dir))
    except ObservationRunError as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


@cli.command(name="export-workbook")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the model summary workbook to write",
)
def export_workbook(config_path: str, output_path: str) -> None:
    """Write an Excel workbook listing the fields of every stored type."""
    try:
        outcome = execute_workbook_export(
            WorkbookExportRequest(config_path=config_path, output_path=output_path)
        )
    except ObservationRunError as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


def _echo_outcome(outcome: RunOutcome) -> None:
    for path in outcome.written_paths:
        click.echo(str(path))
    if outcome.skipped_payloads:
        click.echo(f"skipped payloads: {outcome.skipped_payloads}", err=True)
    if outcome.unsaved_type_names:
        click.echo(
            f"schemas not persisted: {', '.join(outcome.unsaved_type_names)}",
            err=True,
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
