"""Project domain specific exceptions."""


class ProjectError(Exception):
    """Base class for project related domain errors."""


class ProjectValidationError(ProjectError):
    """Raised when user input is missing a required field."""


class ScriptIndexOutOfRange(ProjectError, IndexError):
    """Raised when a script position does not exist in the sequence."""
