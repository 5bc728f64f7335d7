"""Base MongoDB repository with reusable patterns.

Provides common functionality for the MongoDB repositories:
- Collection handle from a shared Motor database
- Document to entity normalization hook
- Error logging on every driver call (errors are re-raised, never retried)

Concrete repositories inherit from MongoBaseRepository.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoTaskListRepository(MongoBaseRepository[TaskList]):
            @property
            def collection_name(self) -> str:
                return "TaskList"

            def from_document(self, doc: Dict[str, Any]) -> TaskList:
                return task_list_from_document(doc)
    """

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        """
        Initialize repository.

        Args:
            database: Motor database shared by all repositories of the process
        """
        self._db = database
        self._collection = database[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """Convert MongoDB document to domain entity."""
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[TEntity]:
        """
        Find single document and normalize it.

        Returns:
            Entity or None if not found
        """
        try:
            doc = await self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
        return self.from_document(doc) if doc else None

    async def _find_many(self, filter_dict: Dict[str, Any]) -> List[TEntity]:
        """Find all matching documents in natural order."""
        try:
            documents = await self._collection.find(filter_dict).to_list(length=None)
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
        return [self.from_document(doc) for doc in documents]

    async def _insert_one(self, document: Dict[str, Any]) -> TEntity:
        """
        Insert single document.

        Returns:
            Entity built from the inserted document and its generated ``_id``
        """
        try:
            result = await self._collection.insert_one(document)
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, error={e}")
            raise
        return self.from_document({**document, "_id": result.inserted_id})

    async def _update_one(self, filter_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> int:
        """
        Update single document.

        Returns:
            Number of documents matched (0 or 1)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict)
        except Exception as e:
            logger.error(
                f"Error in update_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
        return int(result.matched_count)

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
        return int(result.deleted_count)
