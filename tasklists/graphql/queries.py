"""Query resolvers for task lists."""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from tasklists.application.task_list.queries import GetTaskListQuery, MyTaskListsQuery
from tasklists.graphql.errors import domain_errors
from tasklists.graphql.permissions import IsAuthenticated
from tasklists.graphql.types import TaskListType, task_list_or_none


@strawberry.type
class Query:
    """Root query type."""

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def my_task_lists(self, info: Info) -> List[TaskListType]:
        """Task lists the caller is a member of.

        Example:
            query { myTaskLists { id title } }
        """
        with domain_errors():
            query = MyTaskListsQuery(repository=info.context.task_lists)
            task_lists = await query.execute(info.context.user)
        return [TaskListType.from_entity(task_list) for task_list in task_lists]

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def get_task_list(self, info: Info, id: strawberry.ID) -> Optional[TaskListType]:
        """Single task list by id, null if it does not exist.

        Example:
            query { getTaskList(id: "...") { title users { name } } }
        """
        with domain_errors():
            query = GetTaskListQuery(
                repository=info.context.task_lists,
                policy=info.context.policy,
            )
            task_list = await query.execute(str(id), info.context.user)
        return task_list_or_none(task_list)
