"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mail_attachments.infrastructure.email.mime_tree import DEFAULT_MAX_NESTING_DEPTH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Mail Attachments"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # API
    cors_allow_origins: list[str] = []
    # POST /attachments/store writes only below this directory
    attachments_root: Path = Path(".")

    # Extraction
    max_nesting_depth: int = Field(default=DEFAULT_MAX_NESTING_DEPTH, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
