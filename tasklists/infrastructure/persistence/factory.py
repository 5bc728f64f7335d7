"""Repository factory for the persistence layer.

Backend selection follows ``Settings.repository_backend``:
- "mongodb": Motor-backed repositories sharing one client (production)
- "inmemory": dictionary-backed repositories (tests, local runs)

Usage:
    repositories = create_repositories(settings)
    ...
    repositories.close()
"""

import logging
from dataclasses import dataclass
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from tasklists.domain.task_list.ports import ITaskListRepository
from tasklists.domain.user.ports import IUserRepository
from tasklists.infrastructure.config import Settings
from tasklists.infrastructure.persistence.in_memory import (
    InMemoryTaskListRepository,
    InMemoryUserRepository,
)
from tasklists.infrastructure.persistence.mongodb import (
    MongoTaskListRepository,
    MongoUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """Persistence handle shared by every request of the process."""

    users: IUserRepository
    task_lists: ITaskListRepository
    client: Optional[AsyncIOMotorClient] = None

    async def ping(self) -> None:
        """Round-trip to the database; no-op for in-memory storage."""
        if self.client is not None:
            await self.client.admin.command("ping")

    def close(self) -> None:
        """Close the MongoDB client if one was opened."""
        if self.client is not None:
            self.client.close()
            logger.info("Closed MongoDB client")


def create_repositories(
    settings: Settings, client: Optional[AsyncIOMotorClient] = None
) -> Repositories:
    """Create repositories based on configuration.

    Args:
        settings: Application settings
        client: Existing Motor client (created from ``settings.mongodb_uri``
            when None and the backend is mongodb)

    Returns:
        Repositories bundle
    """
    if settings.repository_backend == "inmemory":
        logger.info("Using in-memory repositories")
        return Repositories(
            users=InMemoryUserRepository(),
            task_lists=InMemoryTaskListRepository(),
        )

    if client is None:
        client = AsyncIOMotorClient(settings.mongodb_uri)
    database = client[settings.mongodb_database]
    logger.info(
        "Using MongoDB repositories",
        extra={"database": settings.mongodb_database},
    )
    return Repositories(
        users=MongoUserRepository(database),
        task_lists=MongoTaskListRepository(database),
        client=client,
    )
