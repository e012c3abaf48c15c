"""
Configuration management using Pydantic settings.
Handles the database connection string, pool sizing and query limits.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Data-access settings with environment variable support."""

    # Application configuration
    environment: str = "development"
    debug: bool = False

    # Full connection string; built from the components below when empty
    database_url: Optional[str] = None

    # Individual database components
    db_driver: str = "postgresql+asyncpg"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "vagrant"
    db_password: str = "123"
    db_name: str = "lightbnb"

    # Connection pool settings
    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle: int = 3600  # seconds
    pool_timeout: int = 30  # seconds

    # Row limits for listing queries; no ceiling unless max_limit is set
    default_limit: int = 10
    max_limit: Optional[int] = None

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure an async driver is used for PostgreSQL URLs."""
        if not v:
            return None
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("pool_size")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("default_limit", "max_limit")
    @classmethod
    def validate_limit_setting(cls, v):
        if v is not None and v < 0:
            raise ValueError("Limit cannot be negative")
        return v

    @property
    def sqlalchemy_url(self) -> str:
        """Connection string handed to the engine."""
        if self.database_url:
            return self.database_url
        return (
            f"{self.db_driver}://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Only one Settings object is created per process.
    """
    return Settings()
