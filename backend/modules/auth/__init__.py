"""
Authentication module.

Handles sign-up, log-in and log-out, server-side sessions, JWT issuing
and validation, password hashing, and the authorization guards every
protected operation applies.

Public API:
- IAuthService: Interface for auth operations
- AuthResult, Session, JWTPayload: Auth data models
- Guards: require_identity, require_anonymous, is_owner
- Auth exceptions: NotAuthenticatedError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthResult, Session, JWTPayload
from .guards import require_identity, require_anonymous, is_owner
from .exceptions import (
    NotAuthenticatedError,
    AlreadyLoggedInError,
    IncorrectPasswordError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthResult",
    "Session",
    "JWTPayload",
    # Guards
    "require_identity",
    "require_anonymous",
    "is_owner",
    # Exceptions
    "NotAuthenticatedError",
    "AlreadyLoggedInError",
    "IncorrectPasswordError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
]
