"""
Base exception classes for the SocialDeck backend.

Each module should define its own exceptions that inherit from these bases.
The GraphQL layer reads `extensions` from raised errors, so every subclass
surfaces a stable `code` to API clients.
"""

from typing import Optional, Any


class ErrorCode:
    """Error codes exposed in the GraphQL error envelope."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    ALREADY_AUTHENTICATED = "ALREADY_AUTHENTICATED"
    INVALID_QUERY_ERROR = "INVALID_QUERY_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SocialDeckError(Exception):
    """
    Base exception for all SocialDeck errors.

    All custom exceptions should inherit from this class.
    """

    default_code: str = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    @property
    def extensions(self) -> dict[str, Any]:
        """GraphQL error extensions for this exception."""
        return {"code": self.code}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidQueryError(SocialDeckError):
    """A referenced entity does not exist, or a collection is unexpectedly empty."""

    default_code = ErrorCode.INVALID_QUERY_ERROR


class NotFoundError(InvalidQueryError):
    """Resource not found."""

    pass


class AuthenticationError(SocialDeckError):
    """Authentication failed (missing, invalid or insufficient credentials)."""

    default_code = ErrorCode.UNAUTHENTICATED


class AlreadyAuthenticatedError(SocialDeckError):
    """An operation reserved for anonymous callers was invoked with an identity."""

    default_code = ErrorCode.ALREADY_AUTHENTICATED


class InternalError(SocialDeckError):
    """Unexpected server-side failure."""

    pass


class DatabaseError(InternalError):
    """Error communicating with the database."""

    def __init__(
        self,
        message: str,
        operation: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.operation = operation
        self.details["operation"] = operation
