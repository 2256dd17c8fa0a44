"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and keeps the GraphQL layer decoupled.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import AuthResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    Every method receives the identity already resolved for the current
    request (None when anonymous).
    """

    async def sign_up(
        self,
        identity: Optional[AuthenticatedUser],
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResult:
        """
        Register a new user and authenticate them.

        Raises:
            AlreadyAuthenticatedError: If the caller is already authenticated
            UserAlreadyExistsError: If the email is already registered
        """
        ...

    async def log_in(
        self,
        identity: Optional[AuthenticatedUser],
        email: str,
        password: str,
    ) -> AuthResult:
        """
        Authenticate with email and password.

        Raises:
            AlreadyAuthenticatedError: If the caller is already authenticated
            UserEmailNotFoundError: If no user has the email
            IncorrectPasswordError: If the password does not match
        """
        ...

    async def log_out(
        self,
        identity: Optional[AuthenticatedUser],
        session_id: Optional[str],
    ) -> str:
        """
        End the caller's session.

        Raises:
            AuthenticationError: If the caller is not authenticated
        """
        ...

    async def resolve_session(self, session_id: Optional[str]) -> Optional[AuthenticatedUser]:
        """Identity held by a live session, or None. Never raises auth errors."""
        ...

    async def resolve_token(self, token: Optional[str]) -> Optional[AuthenticatedUser]:
        """Identity carried by a valid token, or None. Never raises auth errors."""
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...
