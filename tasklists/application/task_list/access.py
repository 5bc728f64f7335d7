"""Access rules for task list operations."""

from dataclasses import dataclass
from typing import Optional

from tasklists.domain.shared.errors import (
    AuthenticationRequiredError,
    TaskListAccessDeniedError,
)
from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.user.entities import User


def require_caller(caller: Optional[User]) -> User:
    """Return the caller or raise if the request is anonymous."""
    if caller is None:
        raise AuthenticationRequiredError()
    return caller


@dataclass(frozen=True)
class MembershipPolicy:
    """Whether operations on a single list require membership.

    With ``enforce=False`` any authenticated caller may read, rename,
    delete or share any list by id. With ``enforce=True`` the caller must
    appear in the list's ``user_ids``.
    """

    enforce: bool = False

    def check(self, task_list: TaskList, caller: User) -> None:
        """
        Raises:
            TaskListAccessDeniedError: If enforced and caller is not a member
        """
        if self.enforce and not task_list.has_member(caller.id):
            raise TaskListAccessDeniedError(task_list.id, caller.id)
