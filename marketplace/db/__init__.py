"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy infrastructure and the catalog ORM model.

Architecture:
------------
├── database.py   - DatabaseManager class, session dependency
├── models.py     - ProductRecord ORM model
└── init_db.py    - DatabaseInitializer for startup

Usage:
------
    from marketplace.db import DatabaseManager, ProductRecord, init_db

    db_manager = DatabaseManager()
    session = db_manager.get_session()

==============================================================================
"""

from .database import DatabaseManager, Base, get_db
from .models import ProductRecord
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    "get_db",
    # Models
    "ProductRecord",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
