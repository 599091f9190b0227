"""
==============================================================================
Database Initialization Module
==============================================================================

Startup setup for the catalog store.

Initialization Flow:
-------------------
1. Verify the database answers
2. Create the products table if missing
3. Log the current row count

Schema changes beyond table creation are out of scope; an existing
``products`` table is used as-is.

Usage:
------
    from marketplace.db import init_db

    init_db()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from marketplace.db.database import DatabaseManager
from marketplace.db.models import ProductRecord


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager instance

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        self._db_manager = db_manager or DatabaseManager()

    def create_tables(self) -> None:
        """Create the catalog tables from the ORM models."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    def count_products(self) -> int:
        """Count rows currently in the products table."""
        session = self._db_manager.get_session()
        try:
            return session.query(ProductRecord).count()
        finally:
            session.close()

    def initialize(self) -> bool:
        """
        Run the full startup sequence.

        Returns:
            True if the store is reachable and the table exists
        """
        if not self._db_manager.verify_connection():
            logger.error("❌ Database unreachable, skipping table creation")
            return False

        self.create_tables()
        logger.info(f"📦 Catalog holds {self.count_products()} products")
        return True


def init_db() -> bool:
    """Initialize the catalog database."""
    return DatabaseInitializer().initialize()
