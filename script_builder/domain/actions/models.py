"""Domain models for action templates and attached action instances."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True, slots=True)
class ActionTemplate:
    name: str
    category: str
    command: str
    description: str
    variables: tuple[str, ...] = ()

    def placeholders(self) -> tuple[str, ...]:
        """Identifiers that appear as ``{identifier}`` in the command, in order of first use."""
        seen: dict[str, None] = {}
        for match in PLACEHOLDER_PATTERN.finditer(self.command):
            seen.setdefault(match.group(1), None)
        return tuple(seen)


@dataclass(slots=True)
class ActionInstance:
    action_name: str
    command: str
    description: str = ""
    variables: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_template(
        cls,
        template: ActionTemplate,
        variables: Optional[Mapping[str, str]] = None,
    ) -> "ActionInstance":
        return cls(
            action_name=template.name,
            command=template.command,
            description=template.description,
            variables=dict(variables or {}),
        )
