"""Task list queries."""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from tasklists.application.task_list.access import MembershipPolicy, require_caller
from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository


@dataclass
class MyTaskListsQuery:
    """Query: task lists the caller is a member of.

    Examples:
        >>> query = MyTaskListsQuery(repository)
        >>> lists = await query.execute(caller)
    """

    repository: ITaskListRepository

    async def execute(self, caller: Optional[User]) -> List[TaskList]:
        """
        Raises:
            AuthenticationRequiredError: If caller is anonymous
        """
        user = require_caller(caller)
        return await self.repository.list_for_member(user.id)


@dataclass
class GetTaskListQuery:
    """Query: single task list by id."""

    repository: ITaskListRepository
    policy: MembershipPolicy

    async def execute(self, task_list_id: str, caller: Optional[User]) -> Optional[TaskList]:
        """
        Returns:
            The list, or None if it does not exist

        Raises:
            AuthenticationRequiredError: If caller is anonymous
            TaskListAccessDeniedError: If membership is enforced and caller
                is not a member
        """
        user = require_caller(caller)
        task_list = await self.repository.get(task_list_id)
        if task_list is not None:
            self.policy.check(task_list, user)
        return task_list


@dataclass
class TaskListUsersQuery:
    """Query: resolve a list's member ids to users.

    One lookup per id, run concurrently. Output follows the stored id
    order; ids without a matching user are omitted.
    """

    users: IUserRepository

    async def execute(self, task_list: TaskList) -> List[User]:
        found = await asyncio.gather(*(self.users.get(user_id) for user_id in task_list.user_ids))
        return [user for user in found if user is not None]
