"""Application configuration powered by pydantic-settings."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized strongly-typed configuration loaded from `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Continuous Assessment Backend"
    PROJECT_VERSION: str = "1.0.0"

    HOST: str = Field("0.0.0.0", description="Interface the HTTP listener binds to")
    PORT: int = Field(3000, description="TCP port the HTTP listener binds to")

    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
