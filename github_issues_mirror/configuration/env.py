"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_issues_mirror.configuration.models import FetcherBackend


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

    # Repository settings
    REPO: str | None = None

    # GitHub API settings
    MIRROR_BACKEND: FetcherBackend = FetcherBackend.GH
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_PAT_TOKEN: str | None = None


def get_settings() -> Settings:
    """Load settings from the environment and the .env file."""
    return Settings()
