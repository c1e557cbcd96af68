"""GET /api/templates -- feature ids available per layer."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from portrait.dependencies import get_template_registry
from portrait.engine.templates import TemplateRegistry
from portrait.models.responses import TemplatesResponse

router = APIRouter()


@router.get("/templates", response_model=TemplatesResponse)
def templates(registry: TemplateRegistry = Depends(get_template_registry)) -> TemplatesResponse:
    return TemplatesResponse(layers={layer: sorted(registry.ids(layer)) for layer in registry.layers()})
