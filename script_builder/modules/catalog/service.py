"""Read-only lookups over the action template catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from script_builder.domain.actions import ActionInstance, ActionTemplate
from script_builder.modules.scripts.resolver import TOOLS_PATH_TOKEN

from .data import CATALOG
from .exceptions import ActionNotFoundError

ALL_CATEGORIES = "All"


class ActionCatalog:
    def __init__(self, templates: Iterable[ActionTemplate] = CATALOG) -> None:
        self._templates = tuple(templates)
        self._by_name = {template.name: template for template in self._templates}

    def __len__(self) -> int:
        return len(self._templates)

    def list_templates(self, category: Optional[str] = None) -> list[ActionTemplate]:
        if not category or category == ALL_CATEGORIES:
            return list(self._templates)
        return [template for template in self._templates if template.category == category]

    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for template in self._templates:
            seen.setdefault(template.category, None)
        return [ALL_CATEGORIES, *seen]

    def get(self, name: str) -> ActionTemplate:
        try:
            return self._by_name[name]
        except KeyError as exc:
            raise ActionNotFoundError(f"Unknown action: {name}") from exc

    def instantiate(self, name: str, variables: Optional[Mapping[str, str]] = None) -> ActionInstance:
        return ActionInstance.from_template(self.get(name), variables)

    def build_instance(
        self,
        name: str,
        variables: Optional[Mapping[str, str]] = None,
        command: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ActionInstance:
        """Snapshot a template, or keep a saved command as given.

        Saved instances replayed through ``POST /project`` or the offline
        export script carry their command already; those are accepted even
        when ``name`` is not in the catalog.
        """
        if command is None:
            instance = self.instantiate(name, variables)
            if description is not None:
                instance.description = description
            return instance
        if description is None:
            template = self._by_name.get(name)
            description = template.description if template else ""
        return ActionInstance(
            action_name=name,
            command=command,
            description=description,
            variables=dict(variables or {}),
        )


def undeclared_variables(template: ActionTemplate) -> set[str]:
    """Declared variables that never appear as a token in the command."""
    present = set(template.placeholders())
    return {name for name in template.variables if name not in present}


def unlisted_placeholders(template: ActionTemplate) -> set[str]:
    """Tokens used by the command but missing from the declared variables."""
    reserved = TOOLS_PATH_TOKEN.strip("{}")
    return {name for name in template.placeholders() if name != reserved and name not in template.variables}
