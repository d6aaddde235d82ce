"""Export specific exceptions."""


class ExportError(Exception):
    """Base class for export errors."""


class ExportIOFailure(ExportError):
    """Raised when the export directory or an export file cannot be written."""
