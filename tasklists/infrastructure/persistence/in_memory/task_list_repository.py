"""In-memory TaskList repository for testing."""

from copy import deepcopy
from typing import Any, Dict, List, Optional

from bson import ObjectId

from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.infrastructure.persistence.documents import (
    parse_object_id,
    require_object_id,
    task_list_from_document,
    task_list_to_document,
)


class InMemoryTaskListRepository(ITaskListRepository):
    """
    In-memory implementation of the ``TaskList`` collection.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Data lost on process restart (in-memory only)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._documents: Dict[ObjectId, Dict[str, Any]] = {}

    def _lookup(self, task_list_id: str) -> Optional[Dict[str, Any]]:
        object_id = parse_object_id(task_list_id)
        if object_id is None:
            return None
        return self._documents.get(object_id)

    async def create(self, title: str, created_at: str, user_ids: List[str]) -> TaskList:
        document = task_list_to_document(title, created_at, user_ids)
        document["_id"] = ObjectId()
        self._documents[document["_id"]] = deepcopy(document)
        return task_list_from_document(document)

    async def get(self, task_list_id: str) -> Optional[TaskList]:
        document = self._lookup(task_list_id)
        return task_list_from_document(document) if document else None

    async def list_for_member(self, user_id: str) -> List[TaskList]:
        return [
            task_list_from_document(document)
            for document in self._documents.values()
            if any(str(member) == str(user_id) for member in document["userIds"])
        ]

    async def update_title(self, task_list_id: str, title: str) -> Optional[TaskList]:
        document = self._lookup(task_list_id)
        if document is None:
            return None
        document["title"] = title
        return task_list_from_document(document)

    async def delete(self, task_list_id: str) -> bool:
        object_id = parse_object_id(task_list_id)
        if object_id is None or object_id not in self._documents:
            return False
        del self._documents[object_id]
        return True

    async def add_member(self, task_list_id: str, user_id: str) -> Optional[TaskList]:
        member_id = require_object_id(user_id, "userId")
        document = self._lookup(task_list_id)
        if document is None:
            return None
        if member_id not in document["userIds"]:
            document["userIds"].append(member_id)
        return task_list_from_document(document)

    def clear(self) -> None:
        """Clear all task lists from memory."""
        self._documents.clear()

    def count(self) -> int:
        """Get total number of task lists in memory."""
        return len(self._documents)
