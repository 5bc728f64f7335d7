"""In-memory persistence adapters for tests and local runs."""

from .task_list_repository import InMemoryTaskListRepository
from .user_repository import InMemoryUserRepository

__all__ = ["InMemoryTaskListRepository", "InMemoryUserRepository"]
