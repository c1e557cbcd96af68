"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from portrait import __version__
from portrait.dependencies import get_template_registry
from portrait.engine.templates import TemplateRegistry
from portrait.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(registry: TemplateRegistry = Depends(get_template_registry)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        templates_loaded=len(registry),
    )
