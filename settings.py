# settings.py
"""
GetUs.Fit API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - SQLite by default, PostgreSQL supported
    DATABASE_URL: str = Field(
        default="sqlite:///./data/getusfit.db",
        description="SQLAlchemy database URL"
    )

    # JWT - generated and persisted to JWT_SECRET_FILE when not provided
    SECRET_KEY: Optional[str] = Field(default=None, description="JWT signing secret")
    JWT_SECRET_FILE: str = Field(default=".jwt_secret", description="Fallback secret location")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60 * 24 * 7,
        description="Access token lifetime (7 days)"
    )

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Environment
    ENV: str = "development"
    DEBUG: bool = True

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173,http://localhost:8000"

    # Open Food Facts (food search and barcode lookup)
    FOOD_API_URL: str = "https://world.openfoodfacts.org"
    FOOD_API_TIMEOUT: float = 8.0
    FOOD_API_USER_AGENT: str = "GetUsFit/1.0 (fitness tracking app)"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite (vs PostgreSQL)."""
        return self.DATABASE_URL.startswith("sqlite")

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set")
        if not self.SECRET_KEY:
            raise ValueError("SECRET_KEY must be set explicitly in production")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
