"""Per-request caller resolution.

Turns the raw ``Authorization`` header into the caller identity:

- no header                         -> anonymous (None)
- invalid token                     -> InvalidTokenError propagates and the
                                       request is aborted
- valid token, no subject / no user -> anonymous (None)
- valid token, existing user        -> that User
"""

import logging
from typing import Optional

from tasklists.domain.auth.ports import ITokenService
from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)


def extract_token(auth_header: Optional[str]) -> Optional[str]:
    """Extract the token from an Authorization header value.

    Accepts both ``Bearer <token>`` and a bare token.

    Examples:
        >>> extract_token("Bearer eyJ...")
        'eyJ...'
        >>> extract_token("eyJ...")
        'eyJ...'
        >>> extract_token("") is None
        True
    """
    if not auth_header or not auth_header.strip():
        return None

    parts = auth_header.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return auth_header.strip()


async def resolve_caller(
    auth_header: Optional[str],
    token_service: ITokenService,
    users: IUserRepository,
) -> Optional[User]:
    """Resolve the caller for one request.

    Args:
        auth_header: Raw Authorization header value, or None
        token_service: Token verifier
        users: User repository

    Returns:
        The authenticated user, or None for an anonymous caller

    Raises:
        InvalidTokenError: Malformed, expired or forged token
    """
    token = extract_token(auth_header)
    if token is None:
        return None

    user_id = token_service.resolve(token)
    if user_id is None:
        return None

    user = await users.get(user_id)
    if user is None:
        logger.debug("Token subject has no matching user", extra={"user_id": user_id})
    return user
