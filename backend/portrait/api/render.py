"""POST /api/render -- composite a face descriptor into SVG markup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from portrait.config import Settings
from portrait.dependencies import get_settings, get_template_registry
from portrait.engine.display import display
from portrait.engine.templates import TemplateRegistry
from portrait.engine.variation import deterministic_random
from portrait.models.requests import RenderRequest
from portrait.models.responses import RenderResponse
from portrait.svg.surface import Container

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/render", response_model=RenderResponse)
def render(
    req: RenderRequest,
    registry: TemplateRegistry = Depends(get_template_registry),
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    face = req.face
    try:
        surface = display(
            Container("api"),
            face,
            req.overrides,
            registry=registry,
            view_box=settings.portrait_view_box,
        )
    except ValidationError as e:
        logger.warning("Rejected overrides: %s", e)
        raise RequestValidationError(e.errors()) from e

    layers = surface.layers()
    logger.info("Rendered face: %d nodes", len(layers))

    return RenderResponse(
        svg=surface.to_markup(),
        layers=layers,
        variation=deterministic_random(face),
    )
