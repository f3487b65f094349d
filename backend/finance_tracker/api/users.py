"""
User sign-up and login endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from finance_tracker.dependencies import get_db
from finance_tracker.schemas.user import LoginRequest, PublicUser, TokenResponse, UserCreate
from finance_tracker.services import auth_service

router = APIRouter(tags=["users"])


@router.post("/users", response_model=PublicUser)
def sign_up(
    user: UserCreate,
    db: Session = Depends(get_db)
):
    """Register a new user. The password is stored hashed."""
    return auth_service.sign_up(db, user.email, user.password_hash)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """Exchange an email and password for a bearer token."""
    token = auth_service.login(db, credentials.email, credentials.password_hash)
    return TokenResponse(token=token)
