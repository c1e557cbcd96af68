"""Template registry and instantiation.

A template is immutable markup plus the placeholder tokens it contains.
Instantiation returns new markup with the face's colors filled in; the
registry and its templates are never modified.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from portrait.engine.aging import resolve_shave
from portrait.models.face import Face, Feature

logger = logging.getLogger(__name__)


class TemplateRegistryError(ValueError):
    """Template source could not be loaded."""


class TokenKind(enum.Enum):
    FACE_SHAVE = "$[faceShave]"
    HEAD_SHAVE = "$[headShave]"
    SKIN_COLOR = "$[skinColor]"
    HAIR_COLOR = "$[hairColor]"
    PRIMARY = "$[primary]"
    SECONDARY = "$[secondary]"
    ACCENT = "$[accent]"

    @property
    def token(self) -> str:
        return self.value


# Substitution precedence
TOKEN_ORDER: tuple[TokenKind, ...] = tuple(TokenKind)


@dataclass(frozen=True)
class Template:
    markup: str
    tokens: tuple[TokenKind, ...] = ()

    @classmethod
    def from_markup(cls, markup: str) -> Template:
        return cls(markup, tuple(k for k in TOKEN_ORDER if k.token in markup))

    def render(self, values: Mapping[TokenKind, str | None]) -> str:
        """Return markup with every occurrence of each known token replaced.

        Tokens without a value (missing or None) stay verbatim.
        """
        out = self.markup
        for kind in self.tokens:
            value = values.get(kind)
            if value is not None:
                out = out.replace(kind.token, value)
        return out


class TemplateRegistry:
    """Read-only ``layer → id → Template`` lookup, shared across renders."""

    def __init__(self, templates: Mapping[str, Mapping[str, Template]]) -> None:
        self._templates = MappingProxyType(
            {layer: MappingProxyType(dict(ids)) for layer, ids in templates.items()}
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, str]]) -> TemplateRegistry:
        templates: dict[str, dict[str, Template]] = {}
        for layer, ids in data.items():
            if not isinstance(ids, Mapping):
                raise TemplateRegistryError(f"Layer {layer!r} must map ids to markup")
            for feature_id, markup in ids.items():
                if not isinstance(markup, str):
                    raise TemplateRegistryError(f"Template {layer}/{feature_id} is not a string")
                templates.setdefault(layer, {})[feature_id] = Template.from_markup(markup)
        return cls(templates)

    @classmethod
    def from_json_file(cls, path: str | Path) -> TemplateRegistry:
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise TemplateRegistryError(f"Cannot read templates from {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise TemplateRegistryError(f"Invalid template JSON in {path}: {e}") from e
        if not isinstance(data, Mapping):
            raise TemplateRegistryError(f"{path} must contain a JSON object")
        registry = cls.from_mapping(data)
        logger.info("Loaded %d templates across %d layers from %s", len(registry), len(registry.layers()), path)
        return registry

    def get(self, layer: str, feature_id: str) -> Template | None:
        ids = self._templates.get(layer)
        if ids is None:
            return None
        return ids.get(feature_id)

    def layers(self) -> list[str]:
        return list(self._templates)

    def ids(self, layer: str) -> list[str]:
        return list(self._templates.get(layer, {}))

    def __contains__(self, layer: object) -> bool:
        return layer in self._templates

    def __len__(self) -> int:
        return sum(len(ids) for ids in self._templates.values())


def token_values(face: Face, feature: Feature) -> dict[TokenKind, str | None]:
    shave = resolve_shave(face, feature)
    colors = list(face.team_colors) + [None] * (3 - len(face.team_colors))
    return {
        TokenKind.FACE_SHAVE: shave,
        TokenKind.HEAD_SHAVE: shave,
        TokenKind.SKIN_COLOR: face.body.color if face.body else None,
        TokenKind.HAIR_COLOR: face.hair.color if face.hair else None,
        TokenKind.PRIMARY: colors[0],
        TokenKind.SECONDARY: colors[1],
        TokenKind.ACCENT: colors[2],
    }


def instantiate(layer: str, feature: Feature, face: Face, registry: TemplateRegistry) -> str | None:
    """Markup for ``feature`` on ``layer`` with colors filled in, or None if there is no template."""
    template = registry.get(layer, feature.id)
    if template is None:
        logger.debug("No template for %s/%s, skipping", layer, feature.id)
        return None
    return template.render(token_values(face, feature))
