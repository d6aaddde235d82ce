from .exceptions import ProjectError, ProjectValidationError, ScriptIndexOutOfRange
from .models import MoveDirection, Project, ProjectVariable, ScriptSlot

__all__ = [
    "MoveDirection",
    "Project",
    "ProjectError",
    "ProjectValidationError",
    "ProjectVariable",
    "ScriptIndexOutOfRange",
    "ScriptSlot",
]
