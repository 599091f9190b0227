"""
==============================================================================
Database Connection Management Module
==============================================================================

SQLAlchemy connection management for the catalog store.

This module implements:
- DatabaseManager: Singleton owning the engine and session factory
- get_db: request-scoped session dependency for FastAPI routes

Engine Configuration:
--------------------
- SQLite: check_same_thread disabled (FastAPI runs sync handlers in a
  thread pool)
- PostgreSQL: pooled connections with pre-ping

    ┌─────────────────┐
    │ DatabaseManager │ (Singleton)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Engine      │ (Connection pool)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Session      │ (Request-scoped)
    └─────────────────┘

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from marketplace.config import get_settings


# Module logger
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for all models
Base = declarative_base()


class DatabaseManager:
    """
    Centralized database connection manager.

    The engine is created lazily on first access so settings can be
    adjusted (for example by tests) before any connection is opened.

    Attributes:
        _engine: SQLAlchemy engine instance (lazy loaded)
        _session_factory: Session factory for creating sessions
        _settings: Application settings reference

    Example:
        >>> db_manager = DatabaseManager()
        >>> session = db_manager.get_session()
        >>> try:
        ...     rows = session.query(ProductRecord).all()
        ... finally:
        ...     session.close()
    """

    _instance: Optional[DatabaseManager] = None

    def __new__(cls) -> DatabaseManager:
        """Ensure only one DatabaseManager instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, '_initialized', False):
            return

        self._settings = get_settings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._initialized = True

        logger.debug("DatabaseManager initialized")

    # =========================================================================
    # ENGINE MANAGEMENT
    # =========================================================================

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine, creating it on first access."""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """
        Create the SQLAlchemy engine for the configured database.

        Returns:
            Configured SQLAlchemy Engine
        """
        database_url = self._settings.sqlalchemy_url
        safe_url = make_url(database_url).render_as_string(hide_password=True)

        if database_url.startswith("sqlite"):
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                echo=self._settings.debug,
            )
            logger.info(f"Created SQLite engine: {safe_url}")
        else:
            engine = create_engine(
                database_url,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
                echo=self._settings.debug,
            )
            logger.info(f"Created database engine with pooling: {safe_url}")

        return engine

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    @property
    def session_factory(self) -> sessionmaker:
        """Get the session factory (lazy initialization)."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """
        Get a new database session.

        The caller is responsible for closing the session.

        Returns:
            New SQLAlchemy Session instance
        """
        return self.session_factory()

    # =========================================================================
    # TABLE MANAGEMENT
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables that don't already exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def verify_connection(self) -> bool:
        """
        Verify the database answers a trivial query.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.debug("Database connection verified")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        """Dispose of the connection pool on shutdown."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        safe_url = make_url(self._settings.sqlalchemy_url).render_as_string(hide_password=True)
        return f"DatabaseManager(url={safe_url!r})"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """Get the global DatabaseManager instance."""
    return DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    The session is closed after the request.

    Usage:
        @router.get("/")
        def list_products(db: Session = Depends(get_db)):
            ...
    """
    db_manager = get_database_manager()
    session = db_manager.get_session()
    try:
        yield session
    finally:
        session.close()
