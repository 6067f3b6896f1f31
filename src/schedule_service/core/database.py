"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for database initialization
"""

import time
from typing import Generator, Dict, Any
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
import logging

from core.config import get_settings
from core.exceptions import ConfigurationException, DatabaseException

logger = logging.getLogger('CORE_DATABASE')

# Get settings
settings = get_settings()

try:
    DATABASE_URL = settings.get_database_url()
except ValueError as e:
    raise ConfigurationException(str(e)) from e


def _engine_config(url: str) -> Dict[str, Any]:
    """Build engine keyword arguments for the configured backend."""
    if make_url(url).get_backend_name() == "sqlite":
        config: Dict[str, Any] = {
            'connect_args': {'check_same_thread': False},
            'echo': settings.db_echo,
        }
        # In-memory databases live on a single connection
        if ":memory:" in url:
            config['poolclass'] = StaticPool
        return config

    return {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }


def masked_database_url() -> str:
    return make_url(DATABASE_URL).render_as_string(hide_password=True)


logger.info(f"Initializing database connection to: {masked_database_url()}")

# Retry with increasing delays while the database comes up
retry_delays = [1, 2, 3, 5, 8][:max(settings.db_connect_retries, 1)]
engine = None

for i, delay in enumerate(retry_delays):
    try:
        engine = create_engine(DATABASE_URL, **_engine_config(DATABASE_URL))
        # Test connection with health check
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info(f"Database connection established successfully on attempt {i+1}")
        break
    except OperationalError as e:
        logger.error(f"Database not ready (attempt {i+1}/{len(retry_delays)}): {e}")
        if i < len(retry_delays) - 1:
            logger.info(f"Retrying in {delay} seconds...")
            time.sleep(delay)
        else:
            raise DatabaseException(
                f"Could not connect to the database after {len(retry_delays)} attempts"
            ) from e

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_database_health() -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with connection pool information

    Example:
        {
            "status": "healthy",
            "backend": "sqlite",
            "connection_pool": "Pool size: 5  Connections in pool: 0 ..."
        }
    """
    try:
        with engine.connect() as conn:
            result = conn.execute(text("SELECT 1"))
            result.fetchone()
            return {
                "status": "healthy",
                "backend": engine.dialect.name,
                "connection_pool": engine.pool.status(),
                "url": masked_database_url(),
            }
    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "backend": engine.dialect.name,
            "url": masked_database_url(),
        }


def init_db() -> None:
    """
    Initialize database tables.

    Safe to call on every startup: ``create_all`` only creates tables that
    do not exist yet.
    """
    from models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        # Re-raise to prevent app startup if critical initialization fails
        raise
