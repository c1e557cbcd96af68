"""Face descriptor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_snake

DEFAULT_TEAM_COLORS = ["#89bfd3", "#7a1319", "#07364f"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)


class Feature(_CamelModel):
    """One layer's entry: which template to draw and how."""

    id: str
    color: str | None = None
    flip: bool = False
    size: float | None = None  # None = 1
    angle: float | None = None  # None = no rotation (0 still rotates)
    shave: str | None = None


class Aging(_CamelModel):
    enabled: bool = False
    age: float = 0.0
    maturity: float = 0.0


class Face(_CamelModel):
    """Complete descriptor for one portrait.

    Fields are snake_case; the camelCase layer names ("hairBg", "eyeLine", ...)
    are accepted on input and used on output.
    """

    fatness: float = 0.5
    team_colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEAM_COLORS), min_length=3, max_length=3
    )
    aging: Aging | None = None

    hair_bg: Feature | None = None
    body: Feature | None = None
    jersey: Feature | None = None
    ear: Feature | None = None
    head: Feature | None = None
    eye_line: Feature | None = None
    smile_line: Feature | None = None
    misc_line: Feature | None = None
    facial_hair: Feature | None = None
    eye: Feature | None = None
    eyebrow: Feature | None = None
    mouth: Feature | None = None
    nose: Feature | None = None
    hair: Feature | None = None
    glasses: Feature | None = None
    accessories: Feature | None = None

    def feature(self, layer: str) -> Feature | None:
        """Look up a feature by layer name ("hairBg" or "hair_bg")."""
        return getattr(self, to_snake(layer), None)

    @property
    def aging_enabled(self) -> bool:
        return self.aging is not None and self.aging.enabled
