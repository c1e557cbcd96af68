"""Entry point — apply overrides, reset the container, composite a fresh surface."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from portrait.engine.compositor import composite
from portrait.engine.override import apply_overrides
from portrait.engine.templates import TemplateRegistry
from portrait.models.face import Face
from portrait.svg.surface import DEFAULT_VIEW_BOX, Container, SvgSurface, resolve_container

logger = logging.getLogger(__name__)


def display(
    container: Container | str | None,
    face: Face,
    overrides: Mapping[str, Any] | None = None,
    *,
    registry: TemplateRegistry,
    containers: dict[str, Container] | None = None,
    view_box: str = DEFAULT_VIEW_BOX,
) -> SvgSurface:
    """Render ``face`` into ``container`` and return the new surface.

    ``container`` is a Container or a key into ``containers``. Raises
    ContainerNotFoundError before anything is drawn if it cannot be resolved.
    """
    apply_overrides(face, overrides)

    target = resolve_container(container, containers)
    target.clear()

    surface = SvgSurface(view_box=view_box)
    target.append(surface)

    composite(surface, face, registry)
    return surface
