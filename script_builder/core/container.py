"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from script_builder.core.config import Settings
from script_builder.domain.projects import Project
from script_builder.modules.catalog import ActionCatalog
from script_builder.modules.devices import (
    DeviceEnumerator,
    OptionProviderRegistry,
    ToolInventory,
    WindowsDeviceEnumerator,
)
from script_builder.modules.export import ExportService
from script_builder.modules.projects import ProjectStore


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    store: ProjectStore
    catalog: ActionCatalog
    enumerator: DeviceEnumerator
    options: OptionProviderRegistry
    tools: ToolInventory
    exporter: ExportService

    @classmethod
    def build(cls, settings: Settings, enumerator: Optional[DeviceEnumerator] = None) -> "ApplicationContainer":
        """Create one set of collaborators for the lifetime of an application."""
        tools_path = settings.tools_path
        if enumerator is None:
            enumerator = WindowsDeviceEnumerator(
                tools_path=tools_path,
                powershell=settings.devices.powershell,
                timeout=settings.devices.command_timeout,
            )
        return cls(
            settings=settings,
            store=ProjectStore(Project(name=settings.default_project_name)),
            catalog=ActionCatalog(),
            enumerator=enumerator,
            options=OptionProviderRegistry.with_enumerator(enumerator),
            tools=ToolInventory(tools_path=tools_path),
            exporter=ExportService(export_dir=settings.export_path, tools_path=tools_path),
        )


__all__ = ["ApplicationContainer"]
