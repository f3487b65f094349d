"""Custom exceptions for the finance tracker backend."""

from typing import Optional


class FinanceTrackerError(Exception):
    """Base exception for all finance tracker errors."""

    status_code = 400

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(FinanceTrackerError):
    """Raised when input validation fails."""

    pass


class ConflictError(FinanceTrackerError):
    """Raised when a write collides with a unique constraint."""

    pass


class NotFoundError(FinanceTrackerError):
    """Raised when a referenced entity does not exist for the caller."""

    pass


class DatabaseError(FinanceTrackerError):
    """Raised for unclassified database failures."""

    pass


class ServiceUnavailableError(FinanceTrackerError):
    """Raised when no pooled connection could be checked out in time."""

    status_code = 503


class AuthenticationError(FinanceTrackerError):
    """Raised when a bearer token or a credential pair is rejected."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized", expose: bool = False) -> None:
        super().__init__(message)
        # Login failures carry a body; token failures answer with a bare 401.
        self.expose = expose
