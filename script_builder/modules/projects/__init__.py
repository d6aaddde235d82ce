"""Public exports for the project store."""

from script_builder.domain.projects import ProjectError, ProjectValidationError, ScriptIndexOutOfRange

from .store import ProjectStore

__all__ = [
    "ProjectError",
    "ProjectStore",
    "ProjectValidationError",
    "ScriptIndexOutOfRange",
]
