"""
Configuration management using Pydantic settings.
Handles database connection parameters read from environment variables or a .env file.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Data layer settings with environment variable support."""

    environment: str = "development"
    debug: bool = False

    # Database connection components (DB_HOST, DB_NAME, DB_USER, DB_PASSWORD)
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "lightbnb"
    db_user: str = ""
    db_password: str = ""

    # Full URL takes precedence over the components when set
    database_url: Optional[str] = None

    # Connection pool settings
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 3600

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure the async driver is used for PostgreSQL URLs."""
        if not v:
            return None
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL for the async engine, built from components if not given directly."""
        if self.database_url:
            return self.database_url
        # Empty credentials are left out so the driver applies PGUSER / .pgpass
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Environment variables are read once per process.
    """
    return Settings()
