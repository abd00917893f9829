"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_buddy.branch.types import IssueType
from gh_buddy.utils.constants import DEFAULT_REMOTE, FALLBACK_BASE_BRANCH


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

    # Git settings
    GH_BUDDY_REMOTE: str = DEFAULT_REMOTE
    GH_BUDDY_FALLBACK_BASE_BRANCH: str = FALLBACK_BASE_BRANCH

    # Branch naming settings
    GH_BUDDY_DEFAULT_ISSUE_TYPE: str = IssueType.FEATURE.value

    # External executables
    GH_EXECUTABLE: str = "gh"
    GIT_EXECUTABLE: str = "git"


settings = Settings()
