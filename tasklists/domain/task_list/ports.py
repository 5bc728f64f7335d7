"""Task list repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tasklists.domain.task_list.entities import TaskList


class ITaskListRepository(ABC):
    """Repository interface for the ``TaskList`` collection.

    Lookups by a malformed identifier behave like lookups of a missing
    document: ``None`` for reads and updates, ``False`` for deletes.
    """

    @abstractmethod
    async def create(self, title: str, created_at: str, user_ids: List[str]) -> TaskList:
        """Insert a new task list and return it with its generated id."""
        pass

    @abstractmethod
    async def get(self, task_list_id: str) -> Optional[TaskList]:
        """Find task list by id."""
        pass

    @abstractmethod
    async def list_for_member(self, user_id: str) -> List[TaskList]:
        """All task lists whose members include ``user_id``.

        Order is the store's natural order. No pagination.
        """
        pass

    @abstractmethod
    async def update_title(self, task_list_id: str, title: str) -> Optional[TaskList]:
        """Set the title and return the list as read back after the update."""
        pass

    @abstractmethod
    async def delete(self, task_list_id: str) -> bool:
        """Delete by id.

        Returns:
            True if a document was removed, False otherwise
        """
        pass

    @abstractmethod
    async def add_member(self, task_list_id: str, user_id: str) -> Optional[TaskList]:
        """Append ``user_id`` to the members if absent, return the read-back.

        Raises:
            BadUserInputError: If ``user_id`` is not a valid identifier
        """
        pass
