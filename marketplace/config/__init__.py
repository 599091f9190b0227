"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from marketplace.config import get_settings

    settings = get_settings()
    print(settings.sqlalchemy_url)
    print(settings.s3_bucket_name)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
