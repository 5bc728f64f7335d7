"""Domain exceptions for the task lists service.

Every error carries a stable ``code`` so the API layer can expose a
distinguishable kind instead of relying on message text.
"""


class TaskListsError(Exception):
    """Base exception for all domain errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthenticationRequiredError(TaskListsError):
    """Operation requires an authenticated caller."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication Error. Please sign in"):
        super().__init__(message)


class InvalidCredentialsError(TaskListsError):
    """Sign-in failed.

    Raised both for unknown email and wrong password so the response does
    not reveal whether an account exists.
    """

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials!"):
        super().__init__(message)


class InvalidTokenError(TaskListsError):
    """Bearer token is malformed, expired or has a bad signature."""

    code = "INVALID_TOKEN"


class TaskListAccessDeniedError(TaskListsError):
    """Caller is not a member of the task list."""

    code = "FORBIDDEN"

    def __init__(self, task_list_id: str, user_id: str):
        """Initialize with the list and caller identifiers.

        Args:
            task_list_id: Task list that was accessed
            user_id: Caller that is not a member
        """
        self.task_list_id = task_list_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not a member of task list {task_list_id}")


class BadUserInputError(TaskListsError):
    """Client supplied an unusable argument (missing input, malformed id)."""

    code = "BAD_USER_INPUT"
