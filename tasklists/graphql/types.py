"""GraphQL types for users, task lists and auth payloads."""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from tasklists.application.auth.commands import AuthUser
from tasklists.application.task_list.queries import TaskListUsersQuery
from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.user.entities import User


@strawberry.type(name="User")
class UserType:
    """Public view of a user. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str
    avatar: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            avatar=user.avatar,
        )


@strawberry.type(name="TaskList")
class TaskListType:
    """Task list with its members resolved on demand.

    Examples:
        query {
          myTaskLists {
            id
            title
            createdAt
            progress
            users { id name }
          }
        }
    """

    id: strawberry.ID
    created_at: str
    title: str
    entity: strawberry.Private[TaskList]

    @classmethod
    def from_entity(cls, task_list: TaskList) -> "TaskListType":
        return cls(
            id=strawberry.ID(task_list.id),
            created_at=task_list.created_at,
            title=task_list.title,
            entity=task_list,
        )

    @strawberry.field
    def progress(self) -> float:
        return self.entity.progress

    @strawberry.field
    async def users(self, info: Info) -> List[UserType]:
        """Members in stored order; ids without a user are skipped."""
        query = TaskListUsersQuery(users=info.context.users)
        members = await query.execute(self.entity)
        return [UserType.from_entity(user) for user in members]

    @strawberry.field
    def todos(self) -> List["TodoType"]:
        """Todos are not stored yet; always empty."""
        return []


@strawberry.type(name="Todo")
class TodoType:
    """Todo item. Declared for clients, no resolver creates one yet."""

    id: strawberry.ID
    content: str
    is_complete: bool
    task_list_id: strawberry.ID
    task_list: TaskListType


@strawberry.type(name="AuthUser")
class AuthUserType:
    """User with a freshly issued bearer token."""

    user: UserType
    token: str

    @classmethod
    def from_result(cls, result: AuthUser) -> "AuthUserType":
        return cls(user=UserType.from_entity(result.user), token=result.token)


@strawberry.input
class SignUpInput:
    email: str
    password: str
    name: str
    avatar: Optional[str] = None


@strawberry.input
class SignInInput:
    email: str
    password: str


def task_list_or_none(task_list: Optional[TaskList]) -> Optional[TaskListType]:
    """Map an optional entity to its GraphQL type."""
    return TaskListType.from_entity(task_list) if task_list is not None else None
