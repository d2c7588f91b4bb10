"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from sync_hold_labeler.configuration.models import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_RAW_CONTENT_HOST,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SYNC_HOLD_LABEL,
)


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
    DRY_RUN: bool = False
    REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_PERSONAL_ACCESS_TOKEN: str | None = None

    # Repository holding both the sync status file and the issues
    GITHUB_REPO_ORG: str | None = None
    GITHUB_REPO_NAME: str | None = None
    GITHUB_REPO_BRANCH_NAME: str | None = None
    GITHUB_REPO_PATH_TO_SYNC_STATUS: str | None = None

    # Raw file hosting and label settings
    RAW_CONTENT_HOST: str = DEFAULT_RAW_CONTENT_HOST
    SYNC_HOLD_LABEL: str = DEFAULT_SYNC_HOLD_LABEL


settings = Settings()
