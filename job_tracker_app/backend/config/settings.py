"""
Centralized configuration management for the Job Application Tracker.
All environment variables and connection settings are managed here.
"""
from typing import Optional, List
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


TABLE_BACKENDS = ("sql", "rest")


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    # =============================================================================
    # APPLICATION SETTINGS
    # =============================================================================
    app_name: str = "Job Application Tracker"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    testing: bool = False

    # =============================================================================
    # REMOTE TABLE SETTINGS
    # =============================================================================
    table_backend: str = "sql"  # sql, rest
    jobs_table_name: str = "jobs"

    @field_validator("table_backend")
    @classmethod
    def validate_table_backend(cls, v):
        v = v.lower()
        if v not in TABLE_BACKENDS:
            raise ValueError(f"TABLE_BACKEND must be one of {', '.join(TABLE_BACKENDS)}")
        return v

    # SQL backend (hosted Postgres connection string, SQLite locally)
    database_url: str = "sqlite:///./job_tracker.db"
    database_echo: bool = False

    # REST backend (hosted backend-as-a-service project)
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    request_timeout_seconds: int = 10

    @property
    def rest_table_url(self) -> str:
        return f"{(self.supabase_url or '').rstrip('/')}/rest/v1/{self.jobs_table_name}"

    # =============================================================================
    # DISPLAY SETTINGS
    # =============================================================================
    display_timezone: str = "UTC"  # IANA name, e.g. America/New_York

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v):
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown DISPLAY_TIMEZONE: {v}")
        return v

    # =============================================================================
    # LOGGING SETTINGS
    # =============================================================================
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # =============================================================================
    # DEVELOPMENT SETTINGS
    # =============================================================================
    api_docs_enabled: bool = True
    cors_enabled: bool = False
    cors_origins: List[str] = ["http://localhost:8000"]

    # =============================================================================
    # CONFIGURATION LOADING
    # =============================================================================
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.testing or self.environment.lower() == "testing"

    def get_database_url(self) -> str:
        """Get database URL with appropriate settings for environment."""
        if self.is_testing():
            return "sqlite:///:memory:"
        return self.database_url

    def validate_required_settings(self) -> List[str]:
        """Validate that all required settings are properly configured."""
        missing = []

        if self.table_backend == "rest":
            if not self.supabase_url:
                missing.append("SUPABASE_URL is required when TABLE_BACKEND is 'rest'")
            if not self.supabase_key:
                missing.append("SUPABASE_KEY is required when TABLE_BACKEND is 'rest'")

        if self.is_production() and self.debug:
            missing.append("DEBUG must be False in production")

        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            missing.append(f"Invalid LOG_LEVEL: {self.log_level}")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    This function is cached to avoid recreating the settings object multiple times.
    """
    return Settings()
