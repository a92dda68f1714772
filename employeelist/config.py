"""
Application settings.
Loaded once from environment variables (and an optional .env file).

Usage:
    from employeelist.config import settings
    print(settings.MONGO_URI)
"""
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "Employee List API"
    API_VERSION: str = "1.0.0"

    # MongoDB
    MONGO_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )
    DB_NAME: str = Field(default="employeelist", description="Database name")
    MONGO_TIMEOUT_MS: int = Field(
        default=5000,
        ge=1,
        description="Server selection timeout for the MongoDB client"
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=1, le=65535)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="text", description="text or json")
    LOG_FILE: Optional[str] = None

    # Frontend bundle served for non-API routes
    STATIC_DIR: str = "dist/Frontend"

    # Comma separated list, "*" allows any origin
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
