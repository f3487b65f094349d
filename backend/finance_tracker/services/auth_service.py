"""
Service for sign-up, credential checks and bearer tokens.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from finance_tracker.config import settings
from finance_tracker.core.exceptions import AuthenticationError
from finance_tracker.database import unit_of_work
from finance_tracker.models.user import User
from finance_tracker.schemas.user import PublicUser

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid email or password"
BEARER_PREFIX = "Bearer "


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(user_id: int, now: Optional[datetime] = None) -> str:
    """Issue a signed token whose subject is the user id."""
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "exp": issued + timedelta(hours=settings.token_ttl_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """Return the user id carried by a valid, unexpired token."""
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
        return int(claims["sub"])
    except (jwt.PyJWTError, ValueError) as exc:
        raise AuthenticationError("Invalid bearer token") from exc


def user_id_from_authorization(header: Optional[str]) -> int:
    """Validate an ``Authorization: Bearer <token>`` header value."""
    if not header or not header.startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing bearer token")
    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Missing bearer token")
    return decode_access_token(token)


def sign_up(db: Session, email: str, password: str) -> PublicUser:
    """
    Register a user with a hashed password.
    Raises ConflictError when the email is taken.
    """
    with unit_of_work(db, "insert user", "A user with that email already exists"):
        user = User(email=email, password_hash=hash_password(password))
        db.add(user)
        db.flush()
        public = PublicUser.model_validate(user)

    logger.info("Registered user %s", public.id)
    return public


def login(db: Session, email: str, password: str) -> str:
    """
    Check credentials and return a bearer token.
    Unknown email and wrong password fail the same way.
    """
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS, expose=True)
    return create_access_token(user.id)
