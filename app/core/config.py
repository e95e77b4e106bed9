"""
Application configuration settings.

Central configuration module using Pydantic BaseSettings with environment variable support.
Loads from .env file and environment variables.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists (python-dotenv)
env_path = Path(".env")
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # App settings
    APP_NAME: str = "Network Configuration Auditor"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = Field(default="local")
    DEBUG: bool = Field(default=False)

    # CORS settings
    CORS_ORIGINS: Union[str, List[str]] = Field(
        default='["http://localhost:3000", "http://localhost:8000"]',
    )

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Input limits enforced by the HTTP layer before the analyzer runs
    MAX_UPLOAD_SIZE: int = Field(
        default=10 * 1024 * 1024, description="Max upload size in bytes (10MB default)"
    )
    MIN_CONFIG_LENGTH: int = Field(
        default=10, description="Shortest configuration text accepted for analysis"
    )

    # Analyzer behaviour
    EXTENDED_BEST_PRACTICES: bool = Field(
        default=True,
        description="Also flag missing banner, logging and service password-encryption",
    )
    WEAK_PASSWORD_CASE_SENSITIVE: bool = Field(
        default=False,
        description="Match configured passwords against the weak-password list case-sensitively",
    )
    KEYWORD_CREDENTIALS: bool = Field(
        default=False,
        description="Take the credential after the password/secret keyword, skipping encryption types",
    )
    SKIP_COMMENT_LINES: bool = Field(
        default=False,
        description="Ignore '!' comment lines in the credential and service checks",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_DIR: str = Field(default="logs")

    # API Authentication
    API_KEY: Optional[str] = Field(
        default=None,
        description="API key for the analysis endpoints. Leave empty to disable authentication.",
    )

    def is_auth_enabled(self) -> bool:
        """Check if a static API key is configured and not empty."""
        return (
            self.API_KEY is not None
            and isinstance(self.API_KEY, str)
            and self.API_KEY.strip() != ""
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
