"""
Authorization guards.

Every protected operation calls one of these first, with the identity
resolved for the current request (None when anonymous).
"""

from typing import Optional

from shared.models import AuthenticatedUser
from .exceptions import AlreadyLoggedInError, NotAuthenticatedError


def require_identity(
    identity: Optional[AuthenticatedUser],
    message: str = "You must authenticate first!",
) -> AuthenticatedUser:
    """
    Ensure the request is authenticated.

    Returns:
        The identity, narrowed to non-None.

    Raises:
        NotAuthenticatedError: If the request is anonymous.
    """
    if identity is None:
        raise NotAuthenticatedError(message)
    return identity


def require_anonymous(
    identity: Optional[AuthenticatedUser],
    message: str = "You are already logged in!",
) -> None:
    """
    Ensure the request is anonymous.

    Raises:
        AlreadyLoggedInError: If the request carries an identity.
    """
    if identity is not None:
        raise AlreadyLoggedInError(message)


def is_owner(identity: AuthenticatedUser, owner_id: str) -> bool:
    """Whether the identity is the owner of a resource."""
    return identity.id == owner_id
