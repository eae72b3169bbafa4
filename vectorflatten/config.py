"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from vectorflatten.engine.config import ConverterConfig


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    vectorflatten_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # SVG clean-up before conversion
    model_optimize: str = "claude-haiku-4-5-20251001"

    # Decimal places in emitted coordinates
    coordinate_precision: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def converter_config(self) -> ConverterConfig:
        return ConverterConfig(precision=self.coordinate_precision)


settings = Settings()
