"""
Authentication service implementation.

Issues identities on sign-up and log-in (a server-side session plus a
signed JWT), resolves identities for incoming requests and ends sessions.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.users.exceptions import UserAlreadyExistsError, UserEmailNotFoundError
from modules.users.models import User, UserCreate
from modules.users.repository import UserRepository
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from .exceptions import AuthNotConfiguredError, IncorrectPasswordError
from .guards import require_anonymous, require_identity
from .interfaces import IAuthService
from .models import AuthResult
from .passwords import PasswordHasher
from .repository import SessionRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)

LOGOUT_MESSAGE = "Successfully logged out."


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users live in MongoDB with bcrypt password hashes; sessions are stored
    server-side and tokens are signed with the server secret.
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionRepository,
        tokens: TokenService,
        passwords: PasswordHasher,
        session_lifetime_seconds: int = 3600,
    ):
        self._users = users
        self._sessions = sessions
        self._tokens = tokens
        self._passwords = passwords
        self._session_lifetime = session_lifetime_seconds

    async def sign_up(
        self,
        identity: Optional[AuthenticatedUser],
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResult:
        """Register a new user, then authenticate them like log_in does."""
        require_anonymous(identity, "You cannot sign up while you are logged in!")

        if await self._users.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        user = await self._users.create(
            UserCreate(
                email=email,
                password_hash=await self._passwords.hash(password),
                first_name=first_name,
                last_name=last_name,
            )
        )
        logger.info("User signed up: %s", user.id)

        return await self._authenticate(user)

    async def log_in(
        self,
        identity: Optional[AuthenticatedUser],
        email: str,
        password: str,
    ) -> AuthResult:
        """Verify credentials and authenticate the user."""
        require_anonymous(identity, "You are already logged in!")

        user = await self._users.get_by_email(email)
        if user is None:
            raise UserEmailNotFoundError(email)

        if not await self._passwords.verify(password, user.password_hash):
            logger.warning("Failed log-in attempt for user %s", user.id)
            raise IncorrectPasswordError(email)

        logger.info("User logged in: %s", user.id)
        return await self._authenticate(user)

    async def log_out(
        self,
        identity: Optional[AuthenticatedUser],
        session_id: Optional[str],
    ) -> str:
        """Destroy the caller's server-side session, if one is open."""
        user = require_identity(identity, "You cannot log out before you are logged in!")

        if session_id:
            await self._sessions.delete(session_id)

        logger.info("User logged out: %s", user.id)
        return LOGOUT_MESSAGE

    async def resolve_session(self, session_id: Optional[str]) -> Optional[AuthenticatedUser]:
        """Identity held by a live session, or None."""
        if not session_id:
            return None

        session = await self._sessions.get(session_id)
        if session is None:
            logger.debug("Unknown session presented")
            return None

        if session.is_expired(datetime.now(timezone.utc)):
            logger.debug("Expired session presented for user %s", session.user.id)
            return None

        return session.user

    async def resolve_token(self, token: Optional[str]) -> Optional[AuthenticatedUser]:
        """Identity carried by a valid token, or None."""
        if not token:
            return None

        try:
            return await self.validate_token(token)
        except AuthNotConfiguredError:
            logger.warning("Bearer token presented but no JWT secret is configured")
            return None
        except AuthenticationError as e:
            logger.debug("Rejected bearer token: %s", e.message)
            return None

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """Validate a JWT token and return the identity it carries."""
        return self._tokens.decode(token).to_identity()

    async def _authenticate(self, user: User) -> AuthResult:
        """Open a session and sign a token for a verified user."""
        identity = user.to_identity()
        now = datetime.now(timezone.utc)

        token = self._tokens.issue(identity, now=now)
        session = await self._sessions.create(identity, self._session_lifetime, now)

        return AuthResult(token=token, user=identity, session=session)
