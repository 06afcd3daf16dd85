"""
Database connection (SQLAlchemy)

Every repository works on a SQLAlchemy Session obtained from this module.
PostgreSQL deployments go through the psycopg2 driver; local tooling and
tests run on SQLite.

Author: TM3
Updated: 2026-02-02
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration (for ORM models)
# ============================================================================

def build_engine(database_url: str):
    """
    Create the SQLAlchemy engine for a database URL.

    SQLite does not accept pool sizing arguments and needs
    check_same_thread disabled because FastAPI runs sync endpoints
    in a threadpool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connection before use
        pool_size=10,  # Connections kept in the pool
        max_overflow=20,  # Extra connections when needed
    )


# SQLAlchemy Engine
engine = build_engine(settings.DATABASE_URL)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base for models
Base = declarative_base()


def get_db():
    """
    FastAPI dependency that yields a SQLAlchemy session per request

    Usage:
        @app.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables known to the declarative Base"""
    # Register the models on Base.metadata before creating tables
    from unidbox import models  # noqa: F401

    logger.info("Creating database tables")
    Base.metadata.create_all(bind=engine)
