"""
Users module exceptions.
"""

from shared.exceptions import InvalidQueryError, NotFoundError, InternalError


class UserNotFoundError(NotFoundError):
    """Raised when no user has the requested ID."""

    def __init__(self, user_id: str):
        super().__init__(
            f"No user with ID {user_id} found!",
            details={"user_id": user_id},
        )


class UserEmailNotFoundError(NotFoundError):
    """Raised when no user has the requested email."""

    def __init__(self, email: str):
        super().__init__(
            f"No user with email {email}!",
            details={"email": email},
        )


class NoUsersError(InvalidQueryError):
    """Raised when the users collection is empty."""

    def __init__(self):
        super().__init__("No users in the database!")


class UserAlreadyExistsError(InternalError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, email: str):
        super().__init__(
            f"User with email {email} already exists!",
            details={"email": email},
        )
