"""In-memory holder for the single project edited by the running service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, Optional

from script_builder.domain.actions import ActionInstance
from script_builder.domain.projects import (
    MoveDirection,
    Project,
    ProjectValidationError,
    ProjectVariable,
    ScriptSlot,
)
from script_builder.modules.scripts import assembler

logger = logging.getLogger(__name__)

_PROJECT_FIELDS = frozenset(item.name for item in fields(Project))


class ProjectStore:
    """Owns the current :class:`Project`.

    Nothing here is durable; the project lives as long as the process. Every
    method runs to completion without awaiting, so a request never observes a
    half-applied change.
    """

    def __init__(self, project: Optional[Project] = None) -> None:
        self._project = project if project is not None else Project()

    def get(self) -> Project:
        return self._project

    def replace(self, changes: Mapping[str, Any]) -> Project:
        """Shallow-merge ``changes`` into the current project.

        Given fields override, omitted fields are kept, and collections are
        replaced wholesale rather than extended. Unknown keys are ignored.
        """
        for key, value in changes.items():
            if key not in _PROJECT_FIELDS:
                logger.debug("Ignoring unknown project field %s", key)
                continue
            if isinstance(value, list):
                value = list(value)
            elif isinstance(value, dict):
                value = dict(value)
            setattr(self._project, key, value)
        return self._project

    def reset(self) -> Project:
        self._project = Project()
        logger.info("Project reset")
        return self._project

    def set_variable(self, name: Optional[str], value: Optional[str], description: Optional[str] = "") -> ProjectVariable:
        if not name or not value:
            raise ProjectValidationError("Name and value are required")
        variable = ProjectVariable(value=value, description=description or "")
        self._project.variables[name] = variable
        return variable

    def remove_variable(self, name: str) -> None:
        self._project.variables.pop(name, None)

    def scripts(self, slot: ScriptSlot) -> list[ActionInstance]:
        return self._project.scripts(ScriptSlot(slot))

    def append_action(self, slot: ScriptSlot, instance: ActionInstance) -> None:
        assembler.append(self.scripts(slot), instance)

    def remove_action(self, slot: ScriptSlot, index: int) -> ActionInstance:
        return assembler.remove_at(self.scripts(slot), index)

    def move_action(self, slot: ScriptSlot, index: int, direction: MoveDirection) -> bool:
        return assembler.move_at(self.scripts(slot), index, direction)
