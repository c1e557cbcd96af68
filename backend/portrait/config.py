"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

_BUNDLED_TEMPLATES = Path(__file__).parent / "data" / "templates.json"


class Settings(BaseSettings):
    portrait_env: str = "development"
    portrait_log_level: str = "info"

    # Template registry source (JSON: {layer: {id: markup}})
    portrait_template_path: Path = _BUNDLED_TEMPLATES

    # Canvas
    portrait_view_box: str = "0 0 400 600"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
