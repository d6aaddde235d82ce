from fastapi import APIRouter

from script_builder.api.routers import actions, devices, export, project, scripts


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(actions.router, tags=["Actions"])
    router.include_router(devices.router, tags=["Devices"])
    router.include_router(project.router, tags=["Project"])
    router.include_router(scripts.router, prefix="/scripts", tags=["Scripts"])
    router.include_router(export.router, prefix="/export", tags=["Export"])
    return router


__all__ = [
    "create_api_router",
]
