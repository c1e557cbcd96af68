"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    templates_loaded: int = 0


class TemplatesResponse(BaseModel):
    layers: dict[str, list[str]] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    svg: str
    layers: list[str] = Field(default_factory=list)
    variation: float = 0.0
