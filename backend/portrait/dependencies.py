"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from portrait.config import settings
from portrait.engine.templates import TemplateRegistry


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_template_registry() -> TemplateRegistry:
    """Load the template registry once per process; it is read-only afterwards."""
    return TemplateRegistry.from_json_file(settings.portrait_template_path)
