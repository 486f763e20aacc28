from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Upload collaborator settings
    NOTE_API_ENDPOINT: str = Field(
        default="http://localhost:8000",
        description="Base URL of the audio upload / note generation service"
    )
    UPLOAD_TIMEOUT: float = Field(
        default=120.0,
        description="Timeout in seconds for the audio upload request"
    )

    # Logging settings
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    LOG_FILE: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    LOG_ROTATION: str = Field(
        default="10 MB",
        description="Log rotation size"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings, cached for performance.

    Returns:
        Application settings
    """
    return Settings()
