"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    app_name: str = "Condition Builder"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Modules imported at startup so they can register rule type handlers
    extensions: list[str] = []

    model_config = SettingsConfigDict(
        env_prefix="CONDITION_BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
