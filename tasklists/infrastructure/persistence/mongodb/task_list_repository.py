"""MongoDB TaskList repository implementation."""

from typing import Any, Dict, List, Optional

from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.infrastructure.persistence.documents import (
    TASK_LISTS_COLLECTION,
    member_filter_values,
    parse_object_id,
    require_object_id,
    task_list_from_document,
    task_list_to_document,
)

from .base import MongoBaseRepository


class MongoTaskListRepository(MongoBaseRepository[TaskList], ITaskListRepository):
    """MongoDB implementation of the ``TaskList`` collection.

    Single-document operations only; the store's per-document atomicity is
    the only consistency guarantee.
    """

    @property
    def collection_name(self) -> str:
        return TASK_LISTS_COLLECTION

    def from_document(self, doc: Dict[str, Any]) -> TaskList:
        return task_list_from_document(doc)

    async def create(self, title: str, created_at: str, user_ids: List[str]) -> TaskList:
        return await self._insert_one(task_list_to_document(title, created_at, user_ids))

    async def get(self, task_list_id: str) -> Optional[TaskList]:
        object_id = parse_object_id(task_list_id)
        if object_id is None:
            return None
        return await self._find_one({"_id": object_id})

    async def list_for_member(self, user_id: str) -> List[TaskList]:
        return await self._find_many({"userIds": {"$in": member_filter_values(user_id)}})

    async def update_title(self, task_list_id: str, title: str) -> Optional[TaskList]:
        object_id = parse_object_id(task_list_id)
        if object_id is None:
            return None
        await self._update_one({"_id": object_id}, {"$set": {"title": title}})
        return await self._find_one({"_id": object_id})

    async def delete(self, task_list_id: str) -> bool:
        object_id = parse_object_id(task_list_id)
        if object_id is None:
            return False
        return await self._delete_one({"_id": object_id}) > 0

    async def add_member(self, task_list_id: str, user_id: str) -> Optional[TaskList]:
        member_id = require_object_id(user_id, "userId")
        object_id = parse_object_id(task_list_id)
        if object_id is None:
            return None
        await self._update_one({"_id": object_id}, {"$addToSet": {"userIds": member_id}})
        return await self._find_one({"_id": object_id})
