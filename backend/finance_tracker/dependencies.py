"""
FastAPI dependencies.
"""

from typing import Generator, Optional
from fastapi import Header, Request
from sqlalchemy.orm import Session
from finance_tracker.database import SessionLocal
from finance_tracker.services.auth_service import user_id_from_authorization


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> int:
    """
    Verify the bearer token and expose the caller's id to the handler.
    Runs on every request; verified tokens are not cached.
    """
    user_id = user_id_from_authorization(authorization)
    request.state.user_id = user_id
    return user_id
