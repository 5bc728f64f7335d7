"""GraphQL context factory for dependency injection.

Provides the per-request context bundle to every resolver:
- Persistence handle (user and task list repositories)
- Credential and token services (for sign-up / sign-in)
- Membership policy
- Resolved caller (None for anonymous requests)
"""

from typing import Any, Optional

from strawberry.fastapi import BaseContext

from tasklists.application.task_list.access import MembershipPolicy
from tasklists.domain.auth.ports import IPasswordHasher, ITokenService
from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.domain.user.entities import User
from tasklists.domain.user.ports import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Injected into resolvers via ``info.context``.

    Attributes:
        users: Repository for the Users collection
        task_lists: Repository for the TaskList collection
        password_hasher: Credential service
        token_service: Token service
        policy: Membership policy for single-list operations
        user: Authenticated caller, None if anonymous
    """

    def __init__(
        self,
        users: IUserRepository,
        task_lists: ITaskListRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
        policy: MembershipPolicy,
        user: Optional[User] = None,
    ) -> None:
        super().__init__()
        self.users = users
        self.task_lists = task_lists
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.policy = policy
        self.user = user

    def get(self, key: str) -> Any:
        """Get dependency by name, None if absent.

        Example:
            >>> repository = info.context.get("task_lists")
        """
        return getattr(self, key, None)


def create_context(
    users: IUserRepository,
    task_lists: ITaskListRepository,
    password_hasher: IPasswordHasher,
    token_service: ITokenService,
    policy: Optional[MembershipPolicy] = None,
    user: Optional[User] = None,
) -> GraphQLContext:
    """Create GraphQL context.

    Example:
        >>> context = create_context(
        ...     users=InMemoryUserRepository(),
        ...     task_lists=InMemoryTaskListRepository(),
        ...     password_hasher=BcryptPasswordHasher(),
        ...     token_service=JwtTokenService("secret"),
        ... )
    """
    return GraphQLContext(
        users=users,
        task_lists=task_lists,
        password_hasher=password_hasher,
        token_service=token_service,
        policy=policy or MembershipPolicy(),
        user=user,
    )
