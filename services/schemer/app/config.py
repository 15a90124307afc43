"""
Application settings and configuration.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Structural Scheme Generator"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    environment: str = "development"

    # FastAPI settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False

    # Used when an upload arrives without a filename
    default_project_name: str = "Untitled project"


@lru_cache()
def get_settings() -> Settings:
    """Returns a cached instance of the application settings."""
    return Settings()
