"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from CARECONNECT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CARECONNECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database (None falls back to ~/.careconnect/careconnect.db)
    db_path: Optional[str] = Field(default=None)

    # HTTP server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    cors_origins: list[str] = Field(default=["*"])

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="json")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
