"""Public exports for script and descriptor export."""

from .exceptions import ExportError, ExportIOFailure
from .renderer import dump_json_descriptor, render_json_descriptor, render_script_file
from .service import (
    ExportPreview,
    ExportResult,
    ExportService,
    batch_filename,
    descriptor_filename,
    export_basename,
)

__all__ = [
    "ExportError",
    "ExportIOFailure",
    "ExportPreview",
    "ExportResult",
    "ExportService",
    "batch_filename",
    "descriptor_filename",
    "dump_json_descriptor",
    "export_basename",
    "render_json_descriptor",
    "render_script_file",
]
