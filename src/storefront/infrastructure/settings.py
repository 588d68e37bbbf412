"""Application configuration — environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``STOREFRONT_``-prefixed environment
variable or a ``.env`` file. get_settings() is cached: one instance per
process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", extra="ignore"
    )

    # Persistence
    data_file: Path = Path("data") / "dados.json"

    # HTTP
    host: str = "127.0.0.1"
    port: int = Field(
        default=3000, validation_alias=AliasChoices("STOREFRONT_PORT", "PORT")
    )
    cors_origins: list[str] = ["*"]
    static_dir: Path = Path("public")

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
