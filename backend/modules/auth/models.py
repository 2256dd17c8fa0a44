"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload.

    Carries a minimal user snapshot: the user ID as the subject and the email.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    model_config = {"extra": "ignore"}

    def to_identity(self) -> AuthenticatedUser:
        """Identity represented by this token."""
        return AuthenticatedUser(id=self.sub, email=self.email)


class Session(BaseModel):
    """
    A server-side session.

    Keyed by the value of the session cookie and holding a snapshot of the
    user taken at log-in or sign-up time.
    """

    id: str = Field(..., description="Session ID (session cookie value)")
    user: AuthenticatedUser = Field(..., description="User snapshot")
    created_at: datetime = Field(..., description="Session creation time (UTC)")
    expires_at: datetime = Field(..., description="Session expiry time (UTC)")

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class AuthResult(BaseModel):
    """Outcome of a successful sign-up or log-in."""

    token: str = Field(..., description="Signed JWT for the user")
    user: AuthenticatedUser = Field(..., description="The authenticated user")
    session: Session = Field(..., description="Server-side session that was opened")
