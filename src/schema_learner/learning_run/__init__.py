"""Learning run domain exports."""

from .learning_session import LearningSession, render_stored_models
from .observation_run_use_case import (
    ObservationRunError,
    execute_observation_run,
    execute_render_run,
    execute_topic_observation_run,
    execute_workbook_export,
)
from .run_contracts import (
    ObservationOutcome,
    ObservationRequest,
    RenderRequest,
    RunOutcome,
    TopicObservationRequest,
    WorkbookExportRequest,
)

__all__ = [
    "LearningSession",
    "ObservationOutcome",
    "ObservationRequest",
    "ObservationRunError",
    "RenderRequest",
    "RunOutcome",
    "TopicObservationRequest",
    "WorkbookExportRequest",
    "execute_observation_run",
    "execute_render_run",
    "execute_topic_observation_run",
    "execute_workbook_export",
    "render_stored_models",
]
