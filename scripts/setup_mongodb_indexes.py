"""Setup MongoDB indexes for the task list backend.

Collections:
- TaskList: task lists, queried by member id
- Users: user accounts, looked up by email on sign-in

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    DB_URI: MongoDB connection string (required)
    DB_NAME: Database name (default: tasklists)
    JWT_SECRET: required by Settings validation
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from tasklists.infrastructure.config import ConfigurationError, Settings
from tasklists.infrastructure.persistence.documents import (
    TASK_LISTS_COLLECTION,
    USERS_COLLECTION,
)

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def create_task_list_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the TaskList collection.

    Indexes:
    - userIds: multikey, backs myTaskLists
    """
    collection = db[TASK_LISTS_COLLECTION]
    logger.info("Creating indexes for '%s' collection...", TASK_LISTS_COLLECTION)

    await collection.create_index([("userIds", 1)], name="idx_user_ids")
    logger.info("  Created index: userIds")


async def create_user_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the Users collection.

    Indexes:
    - email: non-unique, since duplicate sign-ups are accepted
    """
    collection = db[USERS_COLLECTION]
    logger.info("Creating indexes for '%s' collection...", USERS_COLLECTION)

    await collection.create_index([("email", 1)], name="idx_email")
    logger.info("  Created index: email")


async def list_existing_indexes(db: AsyncIOMotorDatabase) -> None:
    """Log the indexes now present on every managed collection."""
    for name in (TASK_LISTS_COLLECTION, USERS_COLLECTION):
        indexes: Dict[str, Any] = await db[name].index_information()
        logger.info("Indexes on '%s':", name)
        for index_name, info in indexes.items():
            keys = ", ".join(f"{k}:{v}" for k, v in info.get("key", []))
            logger.info("  - %s: [%s]", index_name, keys)


async def setup_all_indexes() -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    if settings.repository_backend != "mongodb" or not settings.mongodb_uri:
        logger.error("DB_URI not configured for the mongodb backend")
        sys.exit(1)

    logger.info("Connecting to MongoDB: %s", settings.mongodb_database)
    client: AsyncIOMotorClient = AsyncIOMotorClient(settings.mongodb_uri)
    db = client[settings.mongodb_database]

    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB successfully")

        await create_task_list_indexes(db)
        await create_user_indexes(db)

        logger.info("All indexes created successfully")
        await list_existing_indexes(db)
    finally:
        client.close()
        logger.info("MongoDB connection closed")


def main() -> None:
    try:
        asyncio.run(setup_all_indexes())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error("Fatal error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
