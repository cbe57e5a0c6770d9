"""
Configuration management for TechMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from techmatch.utils.constants import (
    APP_NAME,
    CORS_ALLOW_HEADERS,
    MAX_MATCH_RESULTS,
    MIN_MATCH_SCORE,
    VERSION,
)


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "techmatch"


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "techmatch"
    username: str | None = None
    password: str | None = None

    # Collections
    profiles_collection: str = "profiles"
    job_postings_collection: str = "job_postings"


class MatchingSettings(BaseSettings):
    """Candidate matching thresholds."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # Results must score strictly above this value
    min_score: int = Field(default=MIN_MATCH_SCORE, ge=0, le=100)
    max_results: int = Field(default=MAX_MATCH_RESULTS, ge=1)


class APISettings(BaseSettings):
    """HTTP handler configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    allow_origin: str = "*"
    allow_headers: list[str] = Field(default_factory=lambda: list(CORS_ALLOW_HEADERS))

    @field_validator("allow_headers")
    @classmethod
    def normalize_headers(cls, v: list[str]) -> list[str]:
        """Header names are case-insensitive; keep them lowercase."""
        return [h.strip().lower() for h in v if h.strip()]

    @property
    def cors_headers(self) -> dict[str, str]:
        """Cross-origin headers attached to every response."""
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Headers": ", ".join(self.allow_headers),
        }


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "techmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True
    audit_file_path: Path | None = None

    @property
    def audit_path(self) -> Path:
        """Audit log location; defaults to audit.log beside the application log."""
        return self.audit_file_path or self.file_path.parent / "audit.log"


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = APP_NAME
    version: str = VERSION
    description: str = "Skill-based candidate matching for job postings"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
