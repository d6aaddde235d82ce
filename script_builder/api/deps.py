"""Reusable FastAPI dependencies."""

from fastapi import Depends, Request

from script_builder.core.container import ApplicationContainer
from script_builder.modules.catalog import ActionCatalog
from script_builder.modules.devices import DeviceEnumerator, OptionProviderRegistry, ToolInventory
from script_builder.modules.export import ExportService
from script_builder.modules.projects import ProjectStore


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_store(container: ApplicationContainer = Depends(get_container)) -> ProjectStore:
    return container.store


def get_catalog(container: ApplicationContainer = Depends(get_container)) -> ActionCatalog:
    return container.catalog


def get_enumerator(container: ApplicationContainer = Depends(get_container)) -> DeviceEnumerator:
    return container.enumerator


def get_option_registry(container: ApplicationContainer = Depends(get_container)) -> OptionProviderRegistry:
    return container.options


def get_tool_inventory(container: ApplicationContainer = Depends(get_container)) -> ToolInventory:
    return container.tools


def get_exporter(container: ApplicationContainer = Depends(get_container)) -> ExportService:
    return container.exporter


__all__ = [
    "get_catalog",
    "get_container",
    "get_enumerator",
    "get_exporter",
    "get_option_registry",
    "get_store",
    "get_tool_inventory",
]
