"""Preview, download and on-disk export of the generated scripts."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from script_builder.api.deps import get_exporter, get_store
from script_builder.domain.projects import ScriptSlot
from script_builder.modules.export import (
    ExportIOFailure,
    ExportResult,
    ExportService,
    batch_filename,
    descriptor_filename,
    dump_json_descriptor,
)
from script_builder.modules.projects import ProjectStore
from script_builder.schemas import ExportPreviewResponse, ExportResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _attachment(content: str, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _export_failed(exc: ExportIOFailure) -> JSONResponse:
    logger.error("Export failed: %s", exc)
    body = ExportResponse(success=False, error=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True, exclude_none=True))


def _export_succeeded(result: ExportResult) -> ExportResponse:
    return ExportResponse(success=True, message=result.message, files=result.files)


@router.get("/preview", response_model=ExportPreviewResponse, summary="Rendered script bodies and descriptor")
async def preview(store: ProjectStore = Depends(get_store), exporter: ExportService = Depends(get_exporter)):
    result = exporter.build_preview(store.get())
    return ExportPreviewResponse(
        before_script=result.before_script,
        after_script=result.after_script,
        json_config=result.json_config,
    )


@router.get("/bat/{script_type}", summary="Download a batch file")
async def download_batch(
    script_type: ScriptSlot,
    store: ProjectStore = Depends(get_store),
    exporter: ExportService = Depends(get_exporter),
):
    project = store.get()
    return _attachment(
        exporter.render_batch(project, script_type),
        batch_filename(project.name, script_type),
        "application/x-bat",
    )


@router.post("/bat", response_model=ExportResponse, response_model_exclude_none=True, summary="Write batch files")
async def export_batch(store: ProjectStore = Depends(get_store), exporter: ExportService = Depends(get_exporter)):
    try:
        result = exporter.write_batch_files(store.get())
    except ExportIOFailure as exc:
        return _export_failed(exc)
    return _export_succeeded(result)


@router.get("/json", summary="Download the Sunshine descriptor")
async def download_descriptor(
    store: ProjectStore = Depends(get_store),
    exporter: ExportService = Depends(get_exporter),
):
    project = store.get()
    return _attachment(
        dump_json_descriptor(exporter.render_descriptor(project)),
        descriptor_filename(project.name),
        "application/json",
    )


@router.post("/json", response_model=ExportResponse, response_model_exclude_none=True, summary="Write the descriptor")
async def export_descriptor(
    store: ProjectStore = Depends(get_store),
    exporter: ExportService = Depends(get_exporter),
):
    try:
        result = exporter.write_json_descriptor(store.get())
    except ExportIOFailure as exc:
        return _export_failed(exc)
    return _export_succeeded(result)
