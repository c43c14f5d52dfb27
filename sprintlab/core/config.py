"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "SprintLab — sprint telemetry, readiness and race prediction."
    VERSION: str = "0.1.0"
    PROJECT_URL: str = "https://github.com/sprintlab/sprintlab"

    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./sprintlab.db"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"

    # Analysis windows
    LOOKBACK_DAYS: int = 60
    BASELINE_ACTIVITY_COUNT: int = 30
    HRV_WINDOW: int = 7
    DEFAULT_HRV: float = 60.0
    RACE_LOOKAHEAD_DAYS: int = 90
    SPRINT_EVENT_MAX_DISTANCE_M: int = 800

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
