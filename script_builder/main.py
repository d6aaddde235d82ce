import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from script_builder import __version__
from script_builder.api import create_api_router
from script_builder.core.config import Settings, get_settings
from script_builder.core.container import ApplicationContainer
from script_builder.modules.devices import DeviceEnumerator

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    logging.basicConfig(level=level, format=settings.logging.format)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    logger.info(
        "Script builder ready: tools=%s exports=%s",
        container.settings.tools_path,
        container.settings.export_path,
    )
    yield
    logger.info("Script builder stopped")


def create_app(
    settings: Optional[Settings] = None,
    enumerator: Optional[DeviceEnumerator] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Build Sunshine before/after batch scripts from a catalog of Windows actions",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.container = ApplicationContainer.build(settings, enumerator=enumerator)
    # appended to asset URLs as ?v=... so browsers refetch after an upgrade
    app.state.static_version = __version__

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.paths.static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(settings.paths.static_dir)), name="static")

    app.include_router(create_api_router(settings.api_prefix))

    templates = Jinja2Templates(directory=str(settings.paths.template_dir))

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def homepage(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": settings.project_name,
                "api_prefix": settings.api_prefix,
                "static_version": app.state.static_version,
            },
        )

    return app


app = create_app()
