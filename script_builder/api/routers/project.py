"""Project and project variable endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from script_builder.api.deps import get_catalog, get_store
from script_builder.modules.catalog import ActionCatalog, ActionNotFoundError
from script_builder.modules.projects import ProjectStore, ProjectValidationError
from script_builder.schemas import (
    ActionInstanceSchema,
    ProjectMutationResponse,
    ProjectResponse,
    ProjectUpdate,
    ProjectVariableSchema,
    VariableCreate,
    VariablesResponse,
)

router = APIRouter()


def _variables_response(store: ProjectStore) -> VariablesResponse:
    return VariablesResponse(
        variables={
            name: ProjectVariableSchema.from_domain(variable) for name, variable in store.get().variables.items()
        }
    )


def _instances(catalog: ActionCatalog, items: list[ActionInstanceSchema]) -> list:
    return [
        catalog.build_instance(
            item.action_name,
            item.variables,
            command=item.command,
            description=item.description,
        )
        for item in items
    ]


@router.get("/project", response_model=ProjectResponse, summary="Current project")
async def get_project(store: ProjectStore = Depends(get_store)):
    return ProjectResponse.from_domain(store.get())


@router.post("/project", response_model=ProjectMutationResponse, summary="Merge changes into the project")
async def update_project(
    payload: ProjectUpdate,
    store: ProjectStore = Depends(get_store),
    catalog: ActionCatalog = Depends(get_catalog),
):
    changes: dict[str, Any] = {}
    try:
        if payload.name is not None:
            changes["name"] = payload.name
        if payload.before_scripts is not None:
            changes["before_scripts"] = _instances(catalog, payload.before_scripts)
        if payload.after_scripts is not None:
            changes["after_scripts"] = _instances(catalog, payload.after_scripts)
    except ActionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if payload.variables is not None:
        changes["variables"] = {name: variable.to_domain() for name, variable in payload.variables.items()}

    project = store.replace(changes)
    return ProjectMutationResponse(project=ProjectResponse.from_domain(project))


@router.post("/project/reset", response_model=ProjectMutationResponse, summary="Start an empty project")
async def reset_project(store: ProjectStore = Depends(get_store)):
    return ProjectMutationResponse(project=ProjectResponse.from_domain(store.reset()))


@router.post("/variables", response_model=VariablesResponse, summary="Set a project variable")
async def set_variable(payload: VariableCreate, store: ProjectStore = Depends(get_store)):
    try:
        store.set_variable(payload.name, payload.value, payload.description)
    except ProjectValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _variables_response(store)


@router.delete("/variables/{name}", response_model=VariablesResponse, summary="Remove a project variable")
async def remove_variable(name: str, store: ProjectStore = Depends(get_store)):
    store.remove_variable(name)
    return _variables_response(store)
