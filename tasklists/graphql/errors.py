"""Domain error translation for resolvers."""

from contextlib import contextmanager
from typing import Iterator

from graphql import GraphQLError

from tasklists.domain.shared.errors import TaskListsError


@contextmanager
def domain_errors() -> Iterator[None]:
    """Re-raise domain errors as GraphQL errors carrying ``extensions.code``.

    Example:
        with domain_errors():
            return await handler.handle(command)
    """
    try:
        yield
    except TaskListsError as e:
        raise GraphQLError(e.message, extensions={"code": e.code}) from e
