"""
Request identity resolution.

Resolves the acting user of a request exactly once, from whichever
mechanism is authoritative for this deployment:
- "session": the session cookie, looked up in the server-side session store
- "token": an `Authorization: Bearer <jwt>` header

Missing, invalid or expired credentials resolve to None (anonymous).
Operations decide for themselves whether anonymity is acceptable.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import AuthenticatedUser
from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_session_id(request: Request, container: ServiceContainer) -> Optional[str]:
    """Session ID carried by the session cookie, if any."""
    return request.cookies.get(container.settings.session_cookie_name) or None


async def get_optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: ServiceContainer = Depends(get_container),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that extracts the identity if the request is authenticated.

    Usage:
        @router.get("/whoami")
        async def whoami(identity: Optional[AuthenticatedUser] = OptionalAuth):
            return {"email": identity.email if identity else None}
    """
    if container.settings.auth_mode == "token":
        token = credentials.credentials if credentials else None
        identity = await container.auth.resolve_token(token)
    else:
        identity = await container.auth.resolve_session(get_session_id(request, container))

    if identity is not None:
        logger.debug("Request authenticated as %s", identity.id)
    return identity


# Type alias for cleaner route definitions
OptionalAuth = Depends(get_optional_identity)
