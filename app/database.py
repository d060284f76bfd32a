"""
GetUs.Fit API - Database Configuration.

SQLAlchemy engine, session factory, and declarative base for ORM models.
SQLite by default (foreign keys enforced per connection), PostgreSQL with
connection pooling when DATABASE_URL points at it.
LAZY INITIALIZATION: Engine connects on first use, not at import time.
"""

from pathlib import Path
from typing import Generator, Optional
import logging

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from settings import settings

logger = logging.getLogger(__name__)

# Declarative base for ORM models
Base = declarative_base()

# Global engine and session factory (initialized lazily)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on ON DELETE CASCADE enforcement for each new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> Engine:
    """
    Get or create the SQLAlchemy engine (lazy initialization).

    Returns:
        Engine: SQLAlchemy engine instance.
    """
    global _engine
    if _engine is None:
        logger.info("Creating database engine...")
        try:
            if settings.is_sqlite:
                database = make_url(settings.DATABASE_URL).database
                if database and database != ":memory:":
                    Path(database).parent.mkdir(parents=True, exist_ok=True)
                _engine = create_engine(
                    settings.DATABASE_URL,
                    echo=False,
                    connect_args={"check_same_thread": False},  # SQLite specific
                )
                event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
            else:
                # PostgreSQL with connection pooling and validation
                _engine = create_engine(
                    settings.DATABASE_URL,
                    echo=False,
                    pool_size=5,
                    max_overflow=10,
                    pool_pre_ping=True,
                    pool_recycle=3600,
                    connect_args={
                        "connect_timeout": 10,
                        "application_name": "getusfit-api",
                    },
                )
            logger.info("Database engine created successfully")
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise
    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get or create the session factory (lazy initialization).

    Returns:
        sessionmaker: SQLAlchemy session factory.
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = get_engine()
        _SessionLocal = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def init_db() -> None:
    """Create every table that does not exist yet."""
    # Registers all ORM models on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    logger.info("Database schema ready")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields a database session and ensures proper cleanup after request.
    Stores commit their own writes; anything left uncommitted is rolled back
    when the session closes.

    Yields:
        Session: SQLAlchemy database session.
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
