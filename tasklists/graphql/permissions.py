"""Strawberry GraphQL permission for authenticated callers."""

import logging
from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from tasklists.domain.shared.errors import AuthenticationRequiredError

logger = logging.getLogger(__name__)


class IsAuthenticated(BasePermission):
    """Permission checker for authenticated callers.

    Passes when the context builder resolved a user for the request.

    Examples:
        @strawberry.mutation(permission_classes=[IsAuthenticated])
        async def create_task_list(self, info: Info, title: str) -> TaskListType:
            caller = info.context.user
    """

    message = AuthenticationRequiredError().message
    error_extensions = {"code": AuthenticationRequiredError.code}

    async def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        if getattr(info.context, "user", None) is None:
            logger.debug("Permission denied: anonymous caller")
            return False
        return True
