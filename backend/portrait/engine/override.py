"""Deep-merge partial overrides into a face descriptor, in place."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_snake

from portrait.models.face import Aging, Face, Feature

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = {"fatness", "team_colors"}


def _nested_model(owner: BaseModel, name: str) -> type[BaseModel] | None:
    """Model class to create when a mapping override targets an empty slot."""
    if not isinstance(owner, Face) or name in _SCALAR_FIELDS:
        return None
    return Aging if name == "aging" else Feature


def _merge(target: BaseModel, overrides: Mapping[str, Any], path: str) -> None:
    fields = type(target).model_fields
    for key, value in overrides.items():
        name = key if key in fields else to_snake(key)
        if name not in fields:
            logger.warning("Override %s%s: unknown field, skipping", path, key)
            continue

        current = getattr(target, name)
        if isinstance(value, Mapping):
            if isinstance(current, BaseModel):
                _merge(current, value, f"{path}{key}.")
                continue
            model = _nested_model(target, name)
            if model is not None:
                setattr(target, name, model.model_validate(value))
                continue

        setattr(target, name, list(value) if isinstance(value, (list, tuple)) else value)


def apply_overrides(face: Face, overrides: Mapping[str, Any] | None) -> Face:
    """Merge ``overrides`` into ``face`` and return it.

    Mapping values merge into nested features (creating them when absent);
    any other value replaces the field and is validated on assignment, so a
    malformed value raises pydantic.ValidationError. Unknown keys are logged
    and skipped.
    """
    if overrides:
        _merge(face, overrides, "")
    return face
