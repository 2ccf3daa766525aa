# settings.py
"""
LiftLog API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB - REQUIRED from environment
    DATABASE_URL: str = Field(..., env="DATABASE_URL", description="MongoDB connection string (required)")
    DATABASE_NAME: str = Field(default="liftlog", env="DATABASE_NAME")
    DATABASE_LAZY_CONNECT: bool = Field(
        default=True,
        env="DATABASE_LAZY_CONNECT",
        description="Connect on the first request if the startup connection failed"
    )

    # JWT - REQUIRED from environment
    SECRET_KEY: str = Field(..., env="SECRET_KEY", description="JWT signing secret (required)")
    ALGORITHM: str = Field(default="HS256", env="ALGORITHM")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24, env="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Environment
    ENV: str = Field(default="development", env="ENV")
    DEBUG: bool = Field(default=True, env="DEBUG")
    LOG_LEVEL: str = Field(default="INFO", env="LOG_LEVEL")

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Workout queries
    WORKOUT_LIST_LIMIT: int = Field(
        default=50,
        env="WORKOUT_LIST_LIMIT",
        description="Number of most recent workouts returned by the unbounded listing"
    )
    STATS_DEFAULT_DAYS: int = Field(
        default=30,
        env="STATS_DEFAULT_DAYS",
        description="Default lookback window for progress statistics"
    )
    STATS_MAX_DAYS: int = Field(
        default=3650,
        env="STATS_MAX_DAYS",
        description="Largest accepted lookback window for progress statistics"
    )
    DEFAULT_TIMEZONE: str = Field(
        default="UTC",
        env="DEFAULT_TIMEZONE",
        description="IANA timezone used for weekly calendar days when none is given"
    )

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if not self.DATABASE_URL.startswith("mongodb"):
            raise ValueError("DATABASE_URL must be a MongoDB connection string")
        if not self.SECRET_KEY or self.SECRET_KEY == "change-me":
            raise ValueError("SECRET_KEY must be changed from default in production")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
