"""Model rendering exports."""

from .constants import MODEL_FILE_SUFFIX, TYPES_COLUMNS, TYPES_SHEET_NAME
from .csharp_model_renderer import (
    RenderError,
    csharp_type_name,
    render_csharp_model,
    write_model_files,
)
from .model_workbook_writer import write_model_workbook

__all__ = [
    "MODEL_FILE_SUFFIX",
    "TYPES_COLUMNS",
    "TYPES_SHEET_NAME",
    "RenderError",
    "csharp_type_name",
    "render_csharp_model",
    "write_model_files",
    "write_model_workbook",
]
