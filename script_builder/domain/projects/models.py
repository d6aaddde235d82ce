"""Project domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from script_builder.domain.actions import ActionInstance


class ScriptSlot(str, Enum):
    BEFORE = "before"
    AFTER = "after"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(slots=True)
class ProjectVariable:
    value: str
    description: str = ""


@dataclass(slots=True)
class Project:
    name: str = ""
    before_scripts: list[ActionInstance] = field(default_factory=list)
    after_scripts: list[ActionInstance] = field(default_factory=list)
    variables: dict[str, ProjectVariable] = field(default_factory=dict)

    def scripts(self, slot: ScriptSlot) -> list[ActionInstance]:
        if slot is ScriptSlot.BEFORE:
            return self.before_scripts
        return self.after_scripts
