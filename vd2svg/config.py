"""Converter configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vd2svg_log_level: str = "warning"

    # Spaces per nesting level in the written SVG
    vd2svg_indent: int = 2

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
