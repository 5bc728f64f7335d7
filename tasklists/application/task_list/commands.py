"""Task list commands and handlers.

Each command carries the caller identity; each handler is built with the
persistence handle. Anonymous callers are rejected before any repository
call.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tasklists.application.task_list.access import MembershipPolicy, require_caller
from tasklists.domain.task_list.entities import TaskList, utc_timestamp
from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.domain.user.entities import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateTaskListCommand:
    """Command: Create a task list owned by the caller."""

    title: str
    caller: Optional[User]


class CreateTaskListCommandHandler:
    """Handler for CreateTaskListCommand."""

    def __init__(self, repository: ITaskListRepository):
        self._repository = repository

    async def handle(
        self, command: CreateTaskListCommand, now: Optional[datetime] = None
    ) -> TaskList:
        """
        Execute create command.

        Args:
            command: CreateTaskListCommand
            now: Creation time (defaults to current UTC time)

        Returns:
            The created list, with the caller as its only member

        Raises:
            AuthenticationRequiredError: If caller is anonymous
        """
        caller = require_caller(command.caller)

        task_list = await self._repository.create(
            title=command.title,
            created_at=utc_timestamp(now),
            user_ids=[caller.id],
        )

        logger.info(
            "Task list created",
            extra={"task_list_id": task_list.id, "user_id": caller.id},
        )
        return task_list


@dataclass(frozen=True)
class UpdateTaskListCommand:
    """Command: Rename a task list."""

    task_list_id: str
    title: str
    caller: Optional[User]


class UpdateTaskListCommandHandler:
    """Handler for UpdateTaskListCommand."""

    def __init__(self, repository: ITaskListRepository, policy: MembershipPolicy):
        self._repository = repository
        self._policy = policy

    async def handle(self, command: UpdateTaskListCommand) -> Optional[TaskList]:
        """
        Execute update command.

        Returns:
            The list read back after the update, None if it does not exist

        Raises:
            AuthenticationRequiredError: If caller is anonymous
            TaskListAccessDeniedError: If membership is enforced and caller
                is not a member
        """
        caller = require_caller(command.caller)

        if self._policy.enforce:
            existing = await self._repository.get(command.task_list_id)
            if existing is None:
                return None
            self._policy.check(existing, caller)

        task_list = await self._repository.update_title(command.task_list_id, command.title)

        logger.info(
            "Task list renamed",
            extra={
                "task_list_id": command.task_list_id,
                "user_id": caller.id,
                "found": task_list is not None,
            },
        )
        return task_list


@dataclass(frozen=True)
class DeleteTaskListCommand:
    """Command: Delete a task list."""

    task_list_id: str
    caller: Optional[User]


class DeleteTaskListCommandHandler:
    """Handler for DeleteTaskListCommand."""

    def __init__(self, repository: ITaskListRepository, policy: MembershipPolicy):
        self._repository = repository
        self._policy = policy

    async def handle(self, command: DeleteTaskListCommand) -> bool:
        """
        Execute delete command.

        Returns:
            True if a list was removed, False if it did not exist

        Raises:
            AuthenticationRequiredError: If caller is anonymous
            TaskListAccessDeniedError: If membership is enforced and caller
                is not a member
        """
        caller = require_caller(command.caller)

        if self._policy.enforce:
            existing = await self._repository.get(command.task_list_id)
            if existing is None:
                return False
            self._policy.check(existing, caller)

        deleted = await self._repository.delete(command.task_list_id)

        if deleted:
            logger.info(
                "Task list deleted",
                extra={"task_list_id": command.task_list_id, "user_id": caller.id},
            )
        else:
            logger.info(
                "Task list not found for deletion",
                extra={"task_list_id": command.task_list_id},
            )
        return deleted


@dataclass(frozen=True)
class AddUserToTaskListCommand:
    """Command: Add a member to a task list."""

    task_list_id: str
    user_id: str
    caller: Optional[User]


class AddUserToTaskListCommandHandler:
    """Handler for AddUserToTaskListCommand.

    Idempotent: adding an existing member returns the list unchanged.
    The added user is not required to exist.
    """

    def __init__(self, repository: ITaskListRepository, policy: MembershipPolicy):
        self._repository = repository
        self._policy = policy

    async def handle(self, command: AddUserToTaskListCommand) -> Optional[TaskList]:
        """
        Execute add-member command.

        Returns:
            The list after the change, None if the list does not exist

        Raises:
            AuthenticationRequiredError: If caller is anonymous
            TaskListAccessDeniedError: If membership is enforced and caller
                is not a member
            BadUserInputError: If user_id is not a valid identifier
        """
        caller = require_caller(command.caller)

        task_list = await self._repository.get(command.task_list_id)
        if task_list is None:
            return None

        self._policy.check(task_list, caller)

        if task_list.has_member(command.user_id):
            return task_list

        updated = await self._repository.add_member(command.task_list_id, command.user_id)

        logger.info(
            "User added to task list",
            extra={
                "task_list_id": command.task_list_id,
                "member_id": command.user_id,
                "user_id": caller.id,
            },
        )
        return updated
