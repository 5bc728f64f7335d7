"""GraphQL schema factory.

Usage:
    from tasklists.graphql.schema import create_schema
    schema = create_schema()
"""

import strawberry

from tasklists.graphql.mutations import Mutation
from tasklists.graphql.queries import Query
from tasklists.graphql.types import TodoType


def create_schema() -> strawberry.Schema:
    """Create the Strawberry schema.

    ``Todo`` is not reachable from any root field except through
    ``TaskList.todos``; it is listed explicitly so it always appears in the
    published schema.
    """
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        types=[TodoType],
    )
