"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging

logger = logging.getLogger('CORE_CONFIG')

DEFAULT_SQLITE_URL = "sqlite:///./schedule_builder.db"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        debug: Debug mode flag
        log_level: Root logging level name

        # HTTP
        api_prefix: Prefix all routers are mounted under
        host: Bind address for uvicorn
        port: Bind port for uvicorn
        cors_origins: Browser origins allowed to call the API

        # Database Configuration
        database_url: Complete database URL (if provided directly)
        db_username: PostgreSQL username
        db_password: PostgreSQL password
        db_host: PostgreSQL host
        db_port: PostgreSQL port
        db_name: PostgreSQL database name

        # Connection Pool Settings
        db_pool_size: Database connection pool size
        db_max_overflow: Maximum overflow connections
        db_pool_timeout: Pool checkout timeout in seconds
        db_pool_recycle: Connection recycle time in seconds
        db_connect_retries: Connection attempts made at startup

        # Services
        slow_operation_ms: Threshold above which service calls are logged as slow
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Schedule Builder API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # HTTP Settings
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["http://localhost:3000"]

    # Database Configuration
    database_url: Optional[str] = None
    db_username: str = "postgres"
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: str = "5432"
    db_name: Optional[str] = None

    # Connection Pool Settings
    db_pool_size: int = 20
    db_max_overflow: int = 30
    db_pool_timeout: int = 10
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False
    db_connect_retries: int = 5

    # Service Settings
    slow_operation_ms: int = 1000

    def get_database_url(self) -> str:
        """
        Construct the database URL from components or return direct URL.

        Falls back to a local SQLite file when neither DATABASE_URL nor
        DB_HOST is configured.

        Returns:
            str: SQLAlchemy database URL

        Raises:
            ValueError: If PostgreSQL configuration is partially provided
        """
        if self.database_url:
            return self.database_url

        if not self.db_host:
            logger.info("No DATABASE_URL or DB_HOST configured, using %s", DEFAULT_SQLITE_URL)
            return DEFAULT_SQLITE_URL

        missing = []
        if not self.db_username:
            missing.append("DB_USERNAME")
        if not self.db_password:
            missing.append("DB_PASSWORD")
        if not self.db_name:
            missing.append("DB_NAME")

        if missing:
            raise ValueError(f"Database configuration incomplete. Missing: {', '.join(missing)}")

        return f"postgresql://{self.db_username}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
