"""Action catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from script_builder.api.deps import get_catalog
from script_builder.modules.catalog import ActionCatalog
from script_builder.schemas import ActionTemplateResponse

router = APIRouter()


@router.get("/actions", response_model=list[ActionTemplateResponse], summary="List action templates")
async def list_actions(category: Optional[str] = None, catalog: ActionCatalog = Depends(get_catalog)):
    return [ActionTemplateResponse.from_domain(template) for template in catalog.list_templates(category)]


@router.get("/categories", response_model=list[str], summary="List action categories")
async def list_categories(catalog: ActionCatalog = Depends(get_catalog)):
    return catalog.categories()
