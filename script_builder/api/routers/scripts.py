"""Before/after script sequence endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from script_builder.api.deps import get_catalog, get_store
from script_builder.domain.projects import MoveDirection, ScriptSlot
from script_builder.modules.catalog import ActionCatalog, ActionNotFoundError
from script_builder.modules.projects import ProjectStore, ScriptIndexOutOfRange
from script_builder.schemas import AddScriptRequest, MoveScriptRequest, OperationResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{script_type}", response_model=OperationResponse, summary="Attach an action to a script")
async def add_script_action(
    script_type: ScriptSlot,
    payload: AddScriptRequest,
    store: ProjectStore = Depends(get_store),
    catalog: ActionCatalog = Depends(get_catalog),
):
    action = payload.action
    try:
        instance = catalog.build_instance(
            action.action_name,
            action.variables,
            command=action.command,
            description=action.description,
        )
    except ActionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    store.append_action(script_type, instance)
    logger.info("Added %s to %s script", instance.action_name, script_type.value)
    return OperationResponse()


@router.delete("/{script_type}/{index}", response_model=OperationResponse, summary="Remove a script action")
async def remove_script_action(script_type: ScriptSlot, index: int, store: ProjectStore = Depends(get_store)):
    try:
        store.remove_action(script_type, index)
    except ScriptIndexOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return OperationResponse()


@router.post("/{script_type}/{index}/move", response_model=OperationResponse, summary="Move a script action")
async def move_script_action(
    script_type: ScriptSlot,
    index: int,
    payload: MoveScriptRequest,
    store: ProjectStore = Depends(get_store),
):
    try:
        store.move_action(script_type, index, MoveDirection(payload.direction))
    except ScriptIndexOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return OperationResponse()
