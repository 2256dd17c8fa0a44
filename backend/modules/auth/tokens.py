"""
JSON Web Token issuing and verification.

Tokens are HS256-signed with the server secret and carry a minimal user
snapshot (ID as subject, email) with a fixed expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError

from shared.models import AuthenticatedUser
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from .models import JWTPayload


class TokenService:
    """Signs and verifies identity tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_minutes = expires_minutes

    def issue(self, user: AuthenticatedUser, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user: Identity to encode
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded JWT string

        Raises:
            AuthNotConfiguredError: If no signing secret is configured
        """
        if not self._secret:
            raise AuthNotConfiguredError()

        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(minutes=self._expires_minutes)

        payload = {
            "sub": user.id,
            "email": user.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> JWTPayload:
        """
        Decode and validate a token.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the signature or payload is invalid
            AuthNotConfiguredError: If no signing secret is configured
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            return JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
        except ValidationError:
            raise InvalidTokenError("Invalid token: malformed payload")
