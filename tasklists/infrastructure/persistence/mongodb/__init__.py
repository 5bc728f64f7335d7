"""MongoDB persistence adapters (Motor)."""

from .task_list_repository import MongoTaskListRepository
from .user_repository import MongoUserRepository

__all__ = ["MongoTaskListRepository", "MongoUserRepository"]
