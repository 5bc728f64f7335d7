"""Mutation resolvers for authentication and task lists.

These resolvers map GraphQL arguments to application commands:
- signUp / signIn: Auth flow, open to anonymous callers
- createTaskList / updateTaskList / deleteTaskList / addUserToTaskList:
  require an authenticated caller
"""

from typing import Optional

import strawberry
from strawberry.types import Info

from tasklists.application.auth.commands import (
    SignInCommand,
    SignInCommandHandler,
    SignUpCommand,
    SignUpCommandHandler,
)
from tasklists.application.task_list.commands import (
    AddUserToTaskListCommand,
    AddUserToTaskListCommandHandler,
    CreateTaskListCommand,
    CreateTaskListCommandHandler,
    DeleteTaskListCommand,
    DeleteTaskListCommandHandler,
    UpdateTaskListCommand,
    UpdateTaskListCommandHandler,
)
from tasklists.domain.shared.errors import BadUserInputError
from tasklists.graphql.errors import domain_errors
from tasklists.graphql.permissions import IsAuthenticated
from tasklists.graphql.types import (
    AuthUserType,
    SignInInput,
    SignUpInput,
    TaskListType,
    task_list_or_none,
)


@strawberry.type
class Mutation:
    """Root mutation type."""

    @strawberry.mutation
    async def sign_up(self, info: Info, input: Optional[SignUpInput] = None) -> AuthUserType:
        """Register a user and return it with a token.

        Example:
            mutation {
              signUp(input: {email: "ada@example.com", password: "pw", name: "Ada"}) {
                token
                user { id name }
              }
            }
        """
        with domain_errors():
            if input is None:
                raise BadUserInputError("input is required")
            handler = SignUpCommandHandler(
                users=info.context.users,
                password_hasher=info.context.password_hasher,
                token_service=info.context.token_service,
            )
            result = await handler.handle(
                SignUpCommand(
                    email=input.email,
                    password=input.password,
                    name=input.name,
                    avatar=input.avatar,
                )
            )
        return AuthUserType.from_result(result)

    @strawberry.mutation
    async def sign_in(self, info: Info, input: Optional[SignInInput] = None) -> AuthUserType:
        """Authenticate with email and password.

        Unknown email and wrong password fail with the same error.
        """
        with domain_errors():
            if input is None:
                raise BadUserInputError("input is required")
            handler = SignInCommandHandler(
                users=info.context.users,
                password_hasher=info.context.password_hasher,
                token_service=info.context.token_service,
            )
            result = await handler.handle(SignInCommand(email=input.email, password=input.password))
        return AuthUserType.from_result(result)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_task_list(self, info: Info, title: str) -> TaskListType:
        """Create a task list owned by the caller."""
        with domain_errors():
            handler = CreateTaskListCommandHandler(repository=info.context.task_lists)
            task_list = await handler.handle(
                CreateTaskListCommand(title=title, caller=info.context.user)
            )
        return TaskListType.from_entity(task_list)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def update_task_list(
        self, info: Info, id: strawberry.ID, title: str
    ) -> TaskListType:
        """Rename a task list.

        A missing list yields null, which the non-null return type reports
        as an error.
        """
        with domain_errors():
            handler = UpdateTaskListCommandHandler(
                repository=info.context.task_lists,
                policy=info.context.policy,
            )
            task_list = await handler.handle(
                UpdateTaskListCommand(task_list_id=str(id), title=title, caller=info.context.user)
            )
        return task_list_or_none(task_list)  # type: ignore[return-value]

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def delete_task_list(self, info: Info, id: strawberry.ID) -> bool:
        """Delete a task list; false if it did not exist."""
        with domain_errors():
            handler = DeleteTaskListCommandHandler(
                repository=info.context.task_lists,
                policy=info.context.policy,
            )
            return await handler.handle(
                DeleteTaskListCommand(task_list_id=str(id), caller=info.context.user)
            )

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def add_user_to_task_list(
        self, info: Info, task_list_id: strawberry.ID, user_id: strawberry.ID
    ) -> Optional[TaskListType]:
        """Add a member to a task list; null if the list does not exist."""
        with domain_errors():
            handler = AddUserToTaskListCommandHandler(
                repository=info.context.task_lists,
                policy=info.context.policy,
            )
            task_list = await handler.handle(
                AddUserToTaskListCommand(
                    task_list_id=str(task_list_id),
                    user_id=str(user_id),
                    caller=info.context.user,
                )
            )
        return task_list_or_none(task_list)
