"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from githubql_enums.utils.constants import DEFAULT_SNAPSHOT_PATH


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Snapshot settings
    SNAPSHOT_PATH: Path = Path(DEFAULT_SNAPSHOT_PATH)


settings = Settings()
