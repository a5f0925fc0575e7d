"""
Configuration settings for the GitHub API service
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API
    github_token: Optional[str] = None
    github_api_base_url: Optional[str] = None  # Point at a test double instead of api.github.com

    # Logging
    log_level: str = "INFO"


# Create a singleton instance
settings = Settings()
