"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from portrait.models.face import Face


class RenderRequest(BaseModel):
    face: Face = Field(..., description="Face descriptor")
    overrides: dict[str, Any] | None = Field(
        default=None,
        description="Partial descriptor merged into the face before rendering",
    )
