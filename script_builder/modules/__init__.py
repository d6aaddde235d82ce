"""Service modules and their public exports."""

from . import catalog, devices, export, projects, scripts

__all__ = [
    "catalog",
    "devices",
    "export",
    "projects",
    "scripts",
]
