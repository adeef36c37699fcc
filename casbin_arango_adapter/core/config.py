"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables (and an
optional .env file). Only the container reads settings; the adapter and the
policy store receive plain constructor arguments so they stay usable without
any environment at all.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from casbin_arango_adapter.core.config import settings

    url = settings.arango_url
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from casbin_arango_adapter.core.enums import Environment

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Adapter settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Values from .env (if present)
        3. Default values (only for non-sensitive config)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # ArangoDB connection
    arango_url: str = Field(
        default="http://localhost:8529",
        description="ArangoDB coordinator URL (e.g., http://localhost:8529)",
    )
    arango_database: str = Field(
        default="_system",
        description="Database holding the policy collection",
    )
    arango_username: str = Field(
        default="root",
        description="ArangoDB user name",
    )
    arango_password: str = Field(
        default="",
        description="ArangoDB password (never logged)",
    )

    # Policy storage
    casbin_collection: str = Field(
        default="casbin",
        description="Document collection holding Casbin rules",
    )
    create_collection: bool = Field(
        default=True,
        description="Create the policy collection on connect when it is missing",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name.

        Args:
            v: Level name from the environment.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return level

    @field_validator("casbin_collection")
    @classmethod
    def validate_collection(cls, v: str) -> str:
        """Reject blank collection names."""
        if not v.strip():
            raise ValueError("casbin_collection must not be empty")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """JSON log output everywhere except local development."""
        return self.environment != Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
