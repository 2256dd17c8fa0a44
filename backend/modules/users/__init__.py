"""
Users module.

Handles user records: lookups, listing and cascading deletes.

Public API:
- IUserService: Interface for user operations
- User, UserCreate: User data models
- User exceptions: UserNotFoundError, NoUsersError, etc.
"""

from .interfaces import IUserService
from .models import User, UserCreate
from .exceptions import (
    UserNotFoundError,
    UserEmailNotFoundError,
    NoUsersError,
    UserAlreadyExistsError,
)

__all__ = [
    "IUserService",
    "User",
    "UserCreate",
    "UserNotFoundError",
    "UserEmailNotFoundError",
    "NoUsersError",
    "UserAlreadyExistsError",
]
