"""JWT implementation of the token service."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError as JWTError

from tasklists.domain.auth.ports import ITokenService
from tasklists.domain.shared.errors import InvalidTokenError


class JwtTokenService(ITokenService):
    """HS256 bearer tokens carrying the user id in the ``id`` claim.

    Examples:
        >>> tokens = JwtTokenService(secret="s3cret")
        >>> token = tokens.issue("652f1c...")
        >>> tokens.resolve(token)
        '652f1c...'
    """

    algorithm = "HS256"

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=30)) -> None:
        """Initialize token service.

        Args:
            secret: Signing secret loaded once at startup
            ttl: Token lifetime (default: 30 days)

        Raises:
            ValueError: If secret is empty
        """
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self.ttl = ttl

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "id": str(user_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def resolve(self, token: str) -> Optional[str]:
        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        subject = payload.get("id")
        return str(subject) if subject else None
