"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from tasklists.domain.user.entities import User


class IUserRepository(ABC):
    """Repository interface for the ``Users`` collection.

    Implementations return normalized ``User`` entities; callers never see
    raw documents.
    """

    @abstractmethod
    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        avatar: Optional[str] = None,
    ) -> User:
        """Insert a new user and return it with its generated id.

        Note:
            Email uniqueness is not enforced.
        """
        pass

    @abstractmethod
    async def get(self, user_id: str) -> Optional[User]:
        """Find user by id.

        Args:
            user_id: String form of the user identifier

        Returns:
            User entity if found, None otherwise (including malformed ids)
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the first user with an exact email match."""
        pass
