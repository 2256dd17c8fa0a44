"""
Authentication module exceptions.

These exceptions are raised by the auth module and surface to API clients
through the GraphQL error envelope with the code of their base class.
"""

from shared.exceptions import AuthenticationError, AlreadyAuthenticatedError, InternalError


class NotAuthenticatedError(AuthenticationError):
    """Raised when a protected operation is invoked without an identity."""

    def __init__(self, message: str = "You must authenticate first!"):
        super().__init__(message)


class AlreadyLoggedInError(AlreadyAuthenticatedError):
    """Raised when an anonymous-only operation is invoked with an identity."""

    def __init__(self, message: str = "You are already logged in!"):
        super().__init__(message)


class IncorrectPasswordError(AuthenticationError):
    """Raised when the supplied password does not match the stored hash."""

    def __init__(self, email: str):
        super().__init__("Incorrect password!", details={"email": email})


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, details={"reason": "INVALID_TOKEN"})


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, details={"reason": "TOKEN_EXPIRED"})


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, details={"reason": "MISSING_TOKEN"})


class AuthNotConfiguredError(InternalError):
    """Raised when the token signing secret is not configured."""

    def __init__(self):
        super().__init__("Server authentication not configured")
