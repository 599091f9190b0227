"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the catalog service using Pydantic Settings.

A single global configuration instance is shared through the application
lifecycle via ``get_settings()``.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Database URL assembled from DB_* variables when DATABASE_URL is unset
- Object store (S3) bucket, region and credentials

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Security Considerations:
-----------------------
- Never commit .env files to version control
- AWS credentials may be left empty to fall back to the boto3
  default credential chain (instance profile, shared config)

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


# Fallback used when neither DATABASE_URL nor DB_HOST is configured
DEFAULT_SQLITE_URL = "sqlite:///./storage/db/marketplace.db"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        database_url: Explicit SQLAlchemy URL (overrides DB_* fields)
        db_host, db_port, db_user, db_password, db_name, db_sslmode:
            PostgreSQL connection parts
        s3_bucket_name: Object store bucket receiving product images
        aws_region: Bucket region, also used in generated locator URLs
        aws_access_key_id: Static access key (optional)
        aws_secret_access_key: Static secret key (optional)
        upload_key_prefix: Key prefix for uploaded objects
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings(db_host="db", db_user="shop", db_name="shop")
        >>> settings.sqlalchemy_url
        'postgresql+psycopg2://shop:@db:5432/shop?sslmode=require'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Marketplace Catalog API",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="Explicit SQLAlchemy connection string"
    )

    db_host: Optional[str] = Field(default=None, description="PostgreSQL host")
    db_port: int = Field(default=5432, ge=1, le=65535, description="PostgreSQL port")
    db_user: str = Field(default="", description="PostgreSQL user")
    db_password: str = Field(default="", description="PostgreSQL password")
    db_name: str = Field(default="", description="PostgreSQL database name")
    db_sslmode: str = Field(default="require", description="libpq sslmode")

    # =========================================================================
    # OBJECT STORE SETTINGS
    # =========================================================================
    s3_bucket_name: str = Field(
        default="",
        description="Bucket receiving uploaded product images"
    )

    aws_region: str = Field(
        default="us-east-1",
        description="Bucket region"
    )

    aws_access_key_id: str = Field(default="", description="AWS access key")
    aws_secret_access_key: str = Field(default="", description="AWS secret key")

    upload_key_prefix: str = Field(
        default="uploads",
        description="Key prefix for uploaded objects"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, falling back to development."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("upload_key_prefix")
    @classmethod
    def strip_key_prefix(cls, value: str) -> str:
        """Drop surrounding slashes so keys never contain '//'."""
        return value.strip().strip("/")

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def sqlalchemy_url(self) -> str:
        """
        Resolve the SQLAlchemy connection string.

        DATABASE_URL wins; otherwise a PostgreSQL URL is assembled from the
        DB_* parts; otherwise a local SQLite file is used.

        Returns:
            SQLAlchemy database URL
        """
        if self.database_url:
            return self.database_url

        if self.db_host:
            return (
                f"postgresql+psycopg2://{quote_plus(self.db_user)}:"
                f"{quote_plus(self.db_password)}@{self.db_host}:{self.db_port}/"
                f"{self.db_name}?sslmode={self.db_sslmode}"
            )

        return DEFAULT_SQLITE_URL

    @property
    def object_store_configured(self) -> bool:
        """Check whether an upload bucket has been configured."""
        return bool(self.s3_bucket_name)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for file-backed SQLite databases.

        Returns:
            Path to database file, or None for other databases
        """
        url = self.sqlalchemy_url
        if url.startswith("sqlite:///"):
            db_path = url.replace("sqlite:///", "", 1)
            if db_path.startswith("./"):
                db_path = db_path[2:]
            return Path(db_path) if db_path else None
        return None

    def ensure_directories(self) -> None:
        """Create the SQLite database directory when one is in use."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Database directory verified: {db_path.parent}")

    def __repr__(self) -> str:
        """String representation without credentials."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"bucket={self.s3_bucket_name!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
