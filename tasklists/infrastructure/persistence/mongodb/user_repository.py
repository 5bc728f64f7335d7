"""MongoDB User repository implementation."""

from typing import Any, Dict, Optional

from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository
from tasklists.infrastructure.persistence.documents import (
    USERS_COLLECTION,
    parse_object_id,
    user_from_document,
    user_to_document,
)

from .base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of the ``Users`` collection.

    Examples:
        >>> repo = MongoUserRepository(client["tasklists"])
        >>> user = await repo.create("Ada", "ada@example.com", hashed)
        >>> found = await repo.find_by_email("ada@example.com")
    """

    @property
    def collection_name(self) -> str:
        return USERS_COLLECTION

    def from_document(self, doc: Dict[str, Any]) -> User:
        return user_from_document(doc)

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        avatar: Optional[str] = None,
    ) -> User:
        return await self._insert_one(user_to_document(name, email, password_hash, avatar))

    async def get(self, user_id: str) -> Optional[User]:
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None
        return await self._find_one({"_id": object_id})

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one({"email": email})
