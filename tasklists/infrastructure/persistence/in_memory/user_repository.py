"""In-memory User repository for testing."""

from copy import deepcopy
from typing import Any, Dict, Optional

from bson import ObjectId

from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository
from tasklists.infrastructure.persistence.documents import (
    parse_object_id,
    user_from_document,
    user_to_document,
)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of the ``Users`` collection.

    Stores the same documents the MongoDB adapter would, keyed by a
    generated ObjectId, so normalization is exercised identically.
    Insertion order is the natural order.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create("Ada", "ada@example.com", hashed)
        >>> await repo.get(user.id)
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._documents: Dict[ObjectId, Dict[str, Any]] = {}

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        avatar: Optional[str] = None,
    ) -> User:
        document = user_to_document(name, email, password_hash, avatar)
        document["_id"] = ObjectId()
        self._documents[document["_id"]] = deepcopy(document)
        return user_from_document(document)

    async def get(self, user_id: str) -> Optional[User]:
        object_id = parse_object_id(user_id)
        document = self._documents.get(object_id) if object_id is not None else None
        return user_from_document(document) if document else None

    async def find_by_email(self, email: str) -> Optional[User]:
        for document in self._documents.values():
            if document.get("email") == email:
                return user_from_document(document)
        return None

    def clear(self) -> None:
        """Clear all users from memory."""
        self._documents.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._documents)
