"""
Database engine, session factory and unit-of-work helpers.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from finance_tracker.config import settings
from finance_tracker.core.exceptions import (
    ConflictError,
    DatabaseError,
    FinanceTrackerError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

POOL_EXHAUSTED_MESSAGE = "Failed to fetch connection from pool"


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores foreign keys unless asked on every connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        engine = create_engine(database_url, connect_args={"check_same_thread": False})
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell unique-constraint failures apart from foreign-key or not-null ones."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == "23505"
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


@contextmanager
def unit_of_work(db: Session, operation: str, conflict_message: str) -> Iterator[Session]:
    """
    Run a block of writes atomically.

    Commits when the block finishes, rolls back on any error. Unique
    violations become ConflictError(conflict_message); other database errors
    become DatabaseError prefixed with "Failed to <operation>".
    """
    try:
        yield db
        db.commit()
    except FinanceTrackerError:
        db.rollback()
        logger.warning("Rolled back %s", operation)
        raise
    except PoolTimeoutError as exc:
        db.rollback()
        raise ServiceUnavailableError(POOL_EXHAUSTED_MESSAGE) from exc
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Rolled back %s: %s", operation, exc.orig)
        if is_unique_violation(exc):
            raise ConflictError(conflict_message) from exc
        raise DatabaseError(f"Failed to {operation}: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Rolled back %s: %s", operation, exc)
        raise DatabaseError(f"Failed to {operation}: {exc}") from exc
