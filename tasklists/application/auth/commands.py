"""Sign-up and sign-in commands and handlers."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from tasklists.domain.auth.ports import IPasswordHasher, ITokenService
from tasklists.domain.shared.errors import InvalidCredentialsError
from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    """A user paired with a freshly issued token. Never persisted."""

    user: User
    token: str


@dataclass(frozen=True)
class SignUpCommand:
    """
    Command: Register a new user.

    Attributes:
        email: Sign-in key (uniqueness not enforced)
        password: Plaintext password, hashed before storage
        name: Display name
        avatar: Optional avatar URL
    """

    email: str
    password: str = field(repr=False)
    name: str
    avatar: Optional[str] = None


class SignUpCommandHandler:
    """Handler for SignUpCommand.

    Duplicate emails are accepted and create distinct users.
    """

    def __init__(
        self,
        users: IUserRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        self._users = users
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def handle(self, command: SignUpCommand) -> AuthUser:
        """
        Execute sign-up.

        Returns:
            The created user (with generated id) and a token for it
        """
        password_hash = self._password_hasher.hash(command.password)
        user = await self._users.create(
            name=command.name,
            email=command.email,
            password_hash=password_hash,
            avatar=command.avatar,
        )

        logger.info("User signed up", extra={"user_id": user.id})

        return AuthUser(user=user, token=self._token_service.issue(user.id))


@dataclass(frozen=True)
class SignInCommand:
    """Command: Authenticate with email and password."""

    email: str
    password: str = field(repr=False)


class SignInCommandHandler:
    """Handler for SignInCommand."""

    def __init__(
        self,
        users: IUserRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        self._users = users
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def handle(self, command: SignInCommand) -> AuthUser:
        """
        Execute sign-in.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password, same
                message in both cases
        """
        user = await self._users.find_by_email(command.email)
        if user is None or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            logger.info("Sign-in rejected")
            raise InvalidCredentialsError()

        logger.info("User signed in", extra={"user_id": user.id})

        return AuthUser(user=user, token=self._token_service.issue(user.id))
