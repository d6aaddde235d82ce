from script_builder.api.routers import actions, devices, export, project, scripts

__all__ = ["actions", "devices", "export", "project", "scripts"]
